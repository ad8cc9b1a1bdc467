"""Unit tests for linkheader.api.link.compose_context."""

import pytest

from linkheader.api.link.compose_context import compose_context
from linkheader.api.types.ResolvedUrl import ResolvedUrl


class TestComposeContextWithBase:
    """Test anchors resolved against a base URL."""

    def test_fragment(self, example_base):
        assert compose_context(example_base, "#foo") == ResolvedUrl("https://www.example.org/#foo")

    def test_relative_path(self):
        base = ResolvedUrl("https://example.org/a/b/c?q=1")
        assert compose_context(base, "../d") == ResolvedUrl("https://example.org/a/d")

    def test_non_http_base(self):
        """Test relative anchors resolve against bases of any scheme."""
        base = ResolvedUrl("coap://example.org/a/")
        assert compose_context(base, "b") == ResolvedUrl("coap://example.org/a/b")

    def test_absolute_anchor_replaces_base(self, example_base):
        assert compose_context(example_base, "http://other.example/x") == ResolvedUrl("http://other.example/x")

    def test_invalid_result(self, example_base):
        assert compose_context(example_base, "http://[::1") is None


class TestComposeContextWithoutBase:
    """Test anchors without a base must be absolute."""

    def test_absolute_anchor(self):
        assert compose_context(None, "https://example.org") == ResolvedUrl("https://example.org/")

    def test_non_hierarchical_anchor(self):
        assert compose_context(None, "urn:isbn:0451450523") == ResolvedUrl("urn:isbn:0451450523")

    @pytest.mark.parametrize("anchor", ["#foo", "/terms", "terms", "", "//example.org/x"])
    def test_relative_anchor(self, anchor):
        assert compose_context(None, anchor) is None


class TestResolvedUrl:
    """Test the ResolvedUrl value object."""

    def test_rejects_relative(self):
        with pytest.raises(ValueError, match="Invalid absolute URL"):
            ResolvedUrl("/relative")

    def test_rejects_non_string(self):
        with pytest.raises(TypeError, match="must be a string"):
            ResolvedUrl(42)  # type: ignore

    def test_parse_normalizes(self):
        assert ResolvedUrl.parse("HTTPS://example.org") == ResolvedUrl("https://example.org/")

    def test_parse_rejects_whitespace(self):
        assert ResolvedUrl.parse("https://example.org/a b") is None
