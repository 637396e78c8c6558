"""Tests for the exception hierarchy."""

from htmlslim.exceptions import (
    ConfigurationError,
    HtmlSlimError,
    InputError,
    InvalidPatternError,
    InvalidSelectorError,
    generate_correlation_id,
)


class TestCorrelationId:
    """Tests for correlation IDs."""

    def test_length(self):
        """Test that IDs are eight characters."""
        assert len(generate_correlation_id()) == 8

    def test_unique(self):
        """Test that IDs differ between calls."""
        assert generate_correlation_id() != generate_correlation_id()


class TestHtmlSlimError:
    """Tests for the base exception."""

    def test_str_includes_correlation_id(self):
        """Test that the string form carries the correlation ID."""
        error = HtmlSlimError("boom", correlation_id="abcd1234")
        assert str(error) == "boom [correlation_id=abcd1234]"
        assert error.message == "boom"

    def test_generates_correlation_id(self):
        """Test that a correlation ID is created when not given."""
        assert len(HtmlSlimError("boom").correlation_id) == 8

    def test_default_context(self):
        """Test that context defaults to an empty dict."""
        assert HtmlSlimError("boom").context == {}


class TestConfigurationErrors:
    """Tests for the configuration error family."""

    def test_option_in_context(self):
        """Test that the option name lands in the context."""
        error = ConfigurationError("bad", option="script", context={"value": "x"})
        assert error.context == {"value": "x", "option": "script"}

    def test_pattern_error(self):
        """Test InvalidPatternError context and hierarchy."""
        error = InvalidPatternError("bad", option="tag", pattern="(")
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, HtmlSlimError)
        assert error.context == {"pattern": "(", "option": "tag"}

    def test_selector_error(self):
        """Test that InvalidSelectorError always names the selector option."""
        error = InvalidSelectorError("bad", selector="div[")
        assert isinstance(error, ConfigurationError)
        assert error.context == {"selector": "div[", "option": "selector"}


class TestInputError:
    """Tests for input read errors."""

    def test_source_in_context(self):
        """Test that the input name lands in the context."""
        error = InputError("cannot decode", source="page.html")
        assert isinstance(error, HtmlSlimError)
        assert not isinstance(error, ConfigurationError)
        assert error.context == {"source": "page.html"}
