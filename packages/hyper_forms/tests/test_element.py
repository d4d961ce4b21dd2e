"""Test the Element base class."""

import logging

import pytest

from hyper_forms import ArgumentError, ElementError, Message, MessageBag, PresenceOf, StringLength, Tag


class TestConstruction:
    """Names are trimmed and required."""

    @pytest.mark.parametrize("raw, expected", [("email", "email"), ("  email ", "email"), ("\tx\n", "x")])
    def test_name_is_trimmed(self, widget_cls, raw, expected):
        """Construction keeps the trimmed name."""
        assert widget_cls(raw).get_name() == expected
        assert widget_cls(raw).name == expected

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
    def test_empty_name_raises(self, widget_cls, raw):
        """Empty or whitespace-only names are rejected."""
        with pytest.raises(ArgumentError, match="name is required"):
            widget_cls(raw)

    def test_argument_error_is_value_error(self, widget_cls):
        """ArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            widget_cls(" ")

    def test_set_name_validates(self, widget_cls):
        """Renaming follows the construction rules."""
        element = widget_cls("a")
        assert element.set_name(" b ").get_name() == "b"
        with pytest.raises(ArgumentError):
            element.set_name("")

    def test_fresh_element_state(self, widget_cls):
        """A new element has empty collections and no form."""
        element = widget_cls("email")
        assert element.get_attributes() == {}
        assert element.get_validators() == []
        assert element.get_filters() is None
        assert element.get_user_options() == {}
        assert element.get_form() is None
        assert isinstance(element.get_messages(), MessageBag)
        assert element.get_label() is None
        assert element.get_default() is None


class TestAttributes:
    def test_get_attribute_default(self, widget_cls):
        """Missing attributes return the supplied default."""
        element = widget_cls("email", {"class": "input"})
        assert element.get_attribute("class") == "input"
        assert element.get_attribute("id") is None
        assert element.get_attribute("id", "fallback") == "fallback"

    def test_set_attribute_and_set_attributes(self, widget_cls):
        """Setters mutate or replace the mapping."""
        element = widget_cls("email")
        element.set_attribute("class", "a")
        assert element.get_attributes() == {"class": "a"}
        element.set_attributes({"id": "b"})
        assert element.get_attributes() == {"id": "b"}

    def test_attributes_are_copied_at_construction(self, widget_cls):
        """The caller's dict is not shared."""
        attrs = {"class": "a"}
        element = widget_cls("email", attrs)
        element.set_attribute("id", "x")
        assert attrs == {"class": "a"}

    def test_unset_attributes_normalized(self, widget_cls):
        """get_attributes never returns None."""
        element = widget_cls("email")
        element.set_attributes(None)
        assert element.get_attributes() == {}

    def test_unset_attributes_safe_everywhere(self, widget_cls):
        """Reads, writes and the label all survive a cleared attribute map."""
        element = widget_cls("email")
        element.set_attributes(None)
        assert element.get_attribute("id", "d") == "d"
        assert element.label() == '<label for="email">email</label>'
        element.set_attribute("class", "input")
        assert element.get_attributes() == {"class": "input"}


class TestFilters:
    def test_add_filter_accumulates_in_order(self, widget_cls):
        """First call starts a list, later calls append."""
        element = widget_cls("email")
        element.add_filter("trim")
        assert element.get_filters() == ["trim"]
        element.add_filter("lower")
        assert element.get_filters() == ["trim", "lower"]
        element.add_filter("striptags")
        assert element.get_filters() == ["trim", "lower", "striptags"]

    def test_add_filter_after_single_string(self, widget_cls):
        """A single filter string becomes a two-element list."""
        element = widget_cls("email").set_filters("trim")
        element.add_filter("lower")
        assert element.get_filters() == ["trim", "lower"]

    def test_set_filters_string(self, widget_cls):
        """A string is kept as is."""
        assert widget_cls("email").set_filters("x").get_filters() == "x"

    def test_set_filters_sequence(self, widget_cls):
        """Tuples are stored as lists."""
        assert widget_cls("email").set_filters(("a", "b")).get_filters() == ["a", "b"]

    @pytest.mark.parametrize("bad", [42, 1.5, {"a": 1}, None, object()])
    def test_set_filters_rejects_other_types(self, widget_cls, bad):
        """Anything but a string or sequence fails."""
        element = widget_cls("email")
        with pytest.raises(ElementError, match="string or a list"):
            element.set_filters(bad)
        assert element.get_filters() is None


class TestValidators:
    def test_add_validator(self, widget_cls):
        """Validators are appended in order."""
        v0, v1 = PresenceOf(), StringLength(max=3)
        element = widget_cls("email").add_validator(v0).add_validator(v1)
        assert element.get_validators() == [v0, v1]

    def test_add_validators_merge(self, widget_cls):
        """Merging keeps current validators first."""
        v0, v1 = PresenceOf(), StringLength(max=3)
        element = widget_cls("email").add_validator(v0)
        element.add_validators([v1], merge=True)
        assert element.get_validators() == [v0, v1]

    def test_add_validators_replace(self, widget_cls):
        """merge=False replaces outright."""
        v0, v1 = PresenceOf(), StringLength(max=3)
        element = widget_cls("email").add_validator(v0)
        element.add_validators([v1], merge=False)
        assert element.get_validators() == [v1]

    def test_add_validators_merge_onto_empty(self, widget_cls):
        """Merging onto nothing yields the new validators."""
        v1 = PresenceOf()
        assert widget_cls("email").add_validators([v1]).get_validators() == [v1]

    def test_add_validators_merge_onto_non_list(self, widget_cls):
        """A non-list current value is treated as empty."""
        v1 = PresenceOf()
        element = widget_cls("email")
        element._validators = None
        element.add_validators((v1,))
        assert element.get_validators() == [v1]


class TestMessages:
    def test_has_messages(self, widget_cls):
        """False when fresh, true after one append."""
        element = widget_cls("email")
        assert element.has_messages() is False
        element.append_message(Message(message="Required", field="email"))
        assert element.has_messages() is True
        assert element.get_messages()[0].message == "Required"

    def test_set_messages_replaces_bag(self, widget_cls):
        """The bag can be swapped wholesale."""
        element = widget_cls("email")
        bag = MessageBag([Message(message="x")])
        element.set_messages(bag)
        assert element.get_messages() is bag
        assert element.messages is bag
        assert element.has_messages()


class TestValueResolution:
    def test_form_wins(self, widget_cls, fake_form, tag):
        """The owning form is authoritative."""
        fake_form.values["email"] = "A"
        tag.set_default("email", "B")
        element = widget_cls("email").set_default("C").set_form(fake_form)
        assert element.get_value() == "A"

    def test_form_is_authoritative_even_when_empty(self, widget_cls, fake_form, tag):
        """A form answering None still wins over the tag store and default."""
        tag.set_default("email", "B")
        element = widget_cls("email").set_default("C").set_form(fake_form)
        assert element.get_value() is None

    def test_tag_store_without_form(self, widget_cls, tag):
        """Without a form the tag store is consulted."""
        tag.set_default("email", "B")
        assert widget_cls("email").set_default("C").get_value() == "B"

    def test_default_without_form_or_store(self, widget_cls):
        """Otherwise the element's own default."""
        assert widget_cls("email").set_default("C").get_value() == "C"

    def test_stored_none_falls_back_to_default(self, widget_cls, tag):
        """A stored None does not hide the default."""
        tag.set_default("email", None)
        assert widget_cls("email").set_default("C").get_value() == "C"

    def test_injected_tag(self, widget_cls, tag):
        """An injected tag is used instead of the process-wide one."""
        own = Tag({"email": "own"})
        tag.set_default("email", "global")
        assert widget_cls("email", tag=own).get_value() == "own"


class TestClear:
    def test_clear_delegates_to_form(self, widget_cls, fake_form):
        """Attached elements ask the form to clear them by name."""
        element = widget_cls("email").set_form(fake_form)
        assert element.clear() is element
        assert fake_form.cleared == ["email"]

    def test_clear_writes_default_to_tag(self, widget_cls, tag):
        """Detached elements reset the tag store to their default."""
        tag.set_default("email", "typed")
        element = widget_cls("email").set_default("initial")
        element.clear()
        assert tag.get_value("email") == "initial"
        assert element.get_value() == "initial"


class TestPrepareAttributes:
    def test_name_in_position_zero(self, widget_cls):
        """Position 0 carries the name."""
        assert widget_cls("email").prepare_attributes()[0] == "email"

    def test_widget_attributes_override_defaults(self, widget_cls):
        """Caller attributes win on collisions."""
        element = widget_cls("email", {"class": "a", "id": "x"})
        attrs = element.prepare_attributes({"class": "b"})
        assert attrs["class"] == "b"
        assert attrs["id"] == "x"

    def test_position_zero_cannot_be_overridden(self, widget_cls):
        """The name is forced even if the caller supplies position 0."""
        assert widget_cls("email").prepare_attributes({0: "other"})[0] == "email"

    def test_non_dict_attributes_ignored(self, widget_cls):
        """A non-mapping is treated as empty."""
        attrs = widget_cls("email").prepare_attributes(["junk"])
        assert attrs == {0: "email"}

    def test_value_added(self, widget_cls):
        """The resolved value is set without checked semantics."""
        attrs = widget_cls("email").set_default("a@b.c").prepare_attributes({})
        assert attrs["value"] == "a@b.c"
        assert "checked" not in attrs

    def test_no_value_key_when_value_is_none(self, widget_cls):
        """A None value adds nothing."""
        assert "value" not in widget_cls("email").prepare_attributes({})

    def test_checked_without_value_key(self, widget_cls):
        """Truthy value with no caller value: value and checked set."""
        attrs = widget_cls("agree").set_default("1").prepare_attributes({}, use_checked=True)
        assert attrs["value"] == "1"
        assert attrs["checked"] == "checked"

    def test_falsy_value_not_checked(self, widget_cls):
        """Falsy values are echoed but not checked."""
        attrs = widget_cls("agree").set_default("").prepare_attributes({}, use_checked=True)
        assert attrs["value"] == ""
        assert "checked" not in attrs

    def test_checked_when_caller_value_matches(self, widget_cls):
        """Equal caller value gets checked."""
        attrs = widget_cls("agree").set_default("1").prepare_attributes({"value": "1"}, use_checked=True)
        assert attrs["checked"] == "checked"

    def test_checked_compares_as_strings(self, widget_cls):
        """An integer value checks a box whose value is its string form."""
        attrs = widget_cls("agree").set_default(1).prepare_attributes({"value": "1"}, use_checked=True)
        assert attrs["checked"] == "checked"

    def test_not_checked_when_caller_value_differs(self, widget_cls):
        """Differing caller value is kept and not checked."""
        attrs = widget_cls("agree").set_default("1").prepare_attributes({"value": "2"}, use_checked=True)
        assert attrs["value"] == "2"
        assert "checked" not in attrs

    def test_element_attributes_not_mutated(self, widget_cls):
        """Preparing never touches the stored attributes."""
        element = widget_cls("email", {"class": "a"}).set_default("v")
        element.prepare_attributes({"id": "x"})
        assert element.get_attributes() == {"class": "a"}


class TestLabel:
    def test_label_defaults_to_name(self, widget_cls):
        """No id and no label: the name is both target and text."""
        assert widget_cls("email").label() == '<label for="email">email</label>'

    def test_label_uses_id_attribute(self, widget_cls):
        """The id attribute is the for target."""
        element = widget_cls("email", {"id": "user-email"})
        assert element.label() == '<label for="user-email">user-email</label>'

    def test_label_text(self, widget_cls):
        """A set label is the text."""
        element = widget_cls("email").set_label("E-mail")
        assert element.label() == '<label for="email">E-mail</label>'

    def test_caller_for_wins(self, widget_cls):
        """A caller-supplied for is kept."""
        element = widget_cls("email")
        assert element.label({"for": "other", "class": "lbl"}) == '<label for="other" class="lbl">email</label>'

    @pytest.mark.parametrize("label, text", [(0, "0"), ("0", "0")])
    def test_zero_like_label_renders(self, widget_cls, label, text):
        """Zero-like labels are still rendered."""
        assert widget_cls("qty").set_label(label).label() == f'<label for="qty">{text}</label>'

    def test_label_is_escaped(self, widget_cls):
        """Label text is escaped."""
        assert "&lt;b&gt;" in widget_cls("x").set_label("<b>").label()


class TestOtherAccessors:
    def test_user_options(self, widget_cls):
        """Single and bulk user options."""
        element = widget_cls("email")
        assert element.get_user_option("help", "none") == "none"
        element.set_user_option("help", "Your address")
        assert element.get_user_option("help") == "Your address"
        element.set_user_options({"a": 1})
        assert element.get_user_options() == {"a": 1}

    def test_form_accessors(self, widget_cls, fake_form):
        """set_form stores a plain reference."""
        element = widget_cls("email").set_form(fake_form)
        assert element.get_form() is fake_form
        assert element.form is fake_form
        element.set_form(None)
        assert element.form is None

    def test_str_renders(self, widget_cls):
        """str() delegates to render()."""
        assert str(widget_cls("email")) == '<input type="text" name="email" id="email">'


class TestLogging:
    @pytest.mark.parametrize(
        "setup, source",
        [
            (lambda element, tag, form: element.set_form(form), "form"),
            (lambda element, tag, form: tag.set_default("email", "B"), "tag store"),
            (lambda element, tag, form: None, "default"),
        ],
    )
    def test_value_source_logged(self, widget_cls, tag, fake_form, caplog, setup, source):
        """get_value records where the value came from."""
        element = widget_cls("email").set_default("C")
        setup(element, tag, fake_form)
        with caplog.at_level(logging.DEBUG, logger="hyper_forms.element"):
            element.get_value()
        assert f"'email' value resolved from {source}" in caplog.text
