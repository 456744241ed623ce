"""Tests for request URI normalization."""

import pytest

from flatsite.core.uri import RequestURI


class TestRequestURIParse:
    """Tests for RequestURI.parse()."""

    @pytest.mark.parametrize("path", ["/", "", "//"])
    def test__root__maps_to_index(self, path: str) -> None:
        """Map the root path to the index page."""
        assert RequestURI.parse(path).page_name == "index"

    def test__root_with_query__maps_to_index(self) -> None:
        """Strip the query string before mapping the root."""
        uri = RequestURI.parse("/?utm=1", "utm=1")

        assert uri.page_name == "index"
        assert uri.query == "utm=1"

    def test__nested_path__strips_separators(self) -> None:
        """Strip leading and trailing slashes from the page name."""
        uri = RequestURI.parse("/blog/first-post/")

        assert uri.page_name == "blog/first-post"
        assert uri.path == "/blog/first-post/"

    def test__query_string__removed(self) -> None:
        """Drop the query suffix from the page name."""
        uri = RequestURI.parse("/about?lang=en&x=1")

        assert uri.page_name == "about"
        assert uri.query == "lang=en&x=1"


class TestRequestURIGetUrlPart:
    """Tests for RequestURI.get_url_part()."""

    def test__parts_are_one_indexed(self) -> None:
        """Return the n-th segment counting from 1."""
        uri = RequestURI.parse("/a/b")

        assert uri.get_url_part(1) == "a"
        assert uri.get_url_part(2) == "b"

    @pytest.mark.parametrize("number", [0, 3, 5, -1])
    def test__out_of_range__returns_none(self, number: int) -> None:
        """Return None instead of raising."""
        assert RequestURI.parse("/a/b").get_url_part(number) is None

    def test__empty_segments__skipped(self) -> None:
        """Ignore empty segments from duplicate separators."""
        uri = RequestURI.parse("//a///b//?q=1")

        assert uri.parts == ("a", "b")
        assert uri.get_url_part(2) == "b"

    def test__zero_segment__kept(self) -> None:
        """Keep a "0" segment, it is not empty."""
        assert RequestURI.parse("/page/0").get_url_part(2) == "0"

    def test__numeric_string__coerced(self) -> None:
        """Accept numbers passed as strings from templates."""
        assert RequestURI.parse("/a/b").get_url_part("2") == "b"

    @pytest.mark.parametrize("number", ["two", None, ""])
    def test__non_numeric__returns_none(self, number: object) -> None:
        """Return None for arguments that aren't numbers."""
        assert RequestURI.parse("/a/b").get_url_part(number) is None  # type: ignore[arg-type]
