"""Tests for localizer.i18n.resolver module."""

# pylint: disable=protected-access

from unittest.mock import Mock

import pytest

from localizer.i18n import (
    InvalidKeyFormatError,
    InvalidTemplateError,
    KeyNotFoundError,
    LanguageNotFoundError,
    LanguageTable,
    LocalizationRegistry,
    NonStringLocalizationTargetError,
    localize_values,
    parse_key_token,
    resolve,
    resolve_token,
)
from tests.factories.i18n import make_runtime_values


class TestResolve:
    """Tests for resolve()."""

    def test_greeting_scenario(self):
        """A registry built from one schema resolves and interpolates."""
        registry = LocalizationRegistry("en", {"greeting": "Hi {name}"})
        assert resolve(registry, "greeting", {"name": "Sam"}) == "Hi Sam"

    def test_failed_switch_keeps_previous_language(self):
        """A rejected language switch leaves resolution on the previous language."""
        registry = LocalizationRegistry("en", {"greeting": "Hi {name}"})
        with pytest.raises(LanguageNotFoundError):
            registry.set_active_language("de")
        assert resolve(registry, "greeting", {"name": "Sam"}) == "Hi Sam"

    def test_follows_active_language(self, bilingual_registry):
        """resolve() uses the active language's table."""
        bilingual_registry.set_active_language("fr")
        assert resolve(bilingual_registry, "greeting", {"name": "Sam"}) == "Salut Sam"

    def test_all_directives(self, registry):
        """Conditional, inflection and injection all apply to the resolved template."""
        assert resolve(registry, "cart.status", {"items": 1}) == "Your cart has 1 item"
        assert resolve(registry, "cart.status", {"items": 3}) == "Your cart has 3 items"
        assert resolve(registry, "cart.status", {"items": 0}) == "Your cart has 0 items (empty)"
        assert resolve(registry, "inbox.summary", {"count": 2}) == "You have 2 new messages"

    def test_runtime_value_bag(self, registry):
        """Values not referenced by the template are ignored."""
        values = make_runtime_values(items=2)
        assert resolve(registry, "cart.status", values) == "Your cart has 2 items"
        assert resolve(registry, "greeting", values) == "Hi Sam"

    def test_without_values(self, registry):
        """Unresolved injections stay visible when no values are given."""
        assert resolve(registry, "greeting") == "Hi {name}"

    def test_missing_key_propagates(self, registry):
        """KeyNotFoundError propagates unchanged."""
        with pytest.raises(KeyNotFoundError):
            resolve(registry, "nope", {})

    def test_missing_active_table_propagates(self, registry):
        """LanguageNotFoundError propagates unchanged."""
        registry._tables.clear()
        with pytest.raises(LanguageNotFoundError):
            resolve(registry, "greeting", {})

    def test_non_string_template_raises(self, registry):
        """A non-string stored value raises InvalidTemplateError."""
        registry._tables["en"] = LanguageTable("en", {"greeting": 42})
        with pytest.raises(InvalidTemplateError):
            resolve(registry, "greeting", {})

    def test_uses_given_engine(self, registry):
        """A custom engine receives the raw template and values."""
        engine = Mock()
        engine.interpolate.return_value = "custom"
        assert resolve(registry, "greeting", {"name": "Sam"}, engine=engine) == "custom"
        engine.interpolate.assert_called_once_with("Hi {name}", {"name": "Sam"})


class TestKeyTokens:
    """Tests for parse_key_token() and resolve_token()."""

    def test_parse_key_token(self):
        """The prefix is stripped."""
        assert parse_key_token("i18n:greeting") == "greeting"

    @pytest.mark.parametrize("token", ["greeting", "i18n:", ""])
    def test_parse_key_token_invalid(self, token):
        """Tokens without prefix or key raise InvalidKeyFormatError."""
        with pytest.raises(InvalidKeyFormatError):
            parse_key_token(token)

    def test_resolve_token(self, registry):
        """resolve_token() parses then resolves."""
        assert resolve_token(registry, "i18n:greeting", {"name": "Ada"}) == "Hi Ada"

    def test_resolve_token_custom_prefix(self, registry):
        """A custom prefix is honoured."""
        assert resolve_token(registry, "t:title", prefix="t:") == "Playground"


class TestLocalizeValues:
    """Tests for localize_values()."""

    def test_localizes_children_by_default(self, registry):
        """The default target is "children"."""
        props = {"children": "i18n:title", "className": "header"}
        assert localize_values(registry, props) == {
            "children": "Playground",
            "className": "header",
        }

    def test_sibling_values_feed_directives(self, registry):
        """The whole input mapping is the runtime value bag."""
        props = {"text": "i18n:inbox.summary", "count": 1}
        result = localize_values(registry, props, targets=["text"])
        assert result["text"] == "You have 1 new message"
        assert result["count"] == 1

    def test_input_is_not_modified(self, registry):
        """A new dict is returned."""
        props = {"children": "i18n:title"}
        localize_values(registry, props)
        assert props == {"children": "i18n:title"}

    def test_missing_and_none_targets_are_skipped(self, registry):
        """Absent or None targets are left alone."""
        props = {"label": None}
        assert localize_values(registry, props, targets=["label", "title"]) == props

    def test_non_string_target_raises(self, registry):
        """Non-textual targets raise NonStringLocalizationTargetError."""
        with pytest.raises(NonStringLocalizationTargetError) as exc_info:
            localize_values(registry, {"children": 5})
        assert exc_info.value.target == "children"

    def test_unprefixed_target_raises(self, registry):
        """Targets without the prefix raise InvalidKeyFormatError."""
        with pytest.raises(InvalidKeyFormatError) as exc_info:
            localize_values(registry, {"children": "Playground"})
        assert exc_info.value.target == "children"

    def test_unknown_key_raises(self, registry):
        """Targets referencing unknown keys raise KeyNotFoundError."""
        with pytest.raises(KeyNotFoundError):
            localize_values(registry, {"children": "i18n:nope"})
