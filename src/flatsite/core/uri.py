"""Request URI normalization.

Derives the logical page name and the URL parts from the raw request
path and query string handed over by the host.
"""

from dataclasses import dataclass, field

INDEX_PAGE = "index"


@dataclass(frozen=True)
class RequestURI:
    """Normalized request path.

    Attributes:
        path: Request path with the query string removed (e.g. "/a/b/")
        query: Raw query string as supplied by the host
        page_name: Logical page name ("index" for the root)
        parts: Non-empty path segments, in order
    """

    path: str
    query: str
    page_name: str
    parts: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, raw_path: str, query_string: str = "") -> "RequestURI":
        """Normalize a raw request path.

        Args:
            raw_path: Path as received, possibly with a "?query" suffix
            query_string: Raw query string supplied separately by the host

        Returns:
            RequestURI for the path
        """
        path, _, inline_query = raw_path.partition("?")
        page_name = path.strip("/") or INDEX_PAGE
        parts = tuple(part for part in path.split("/") if part)
        return cls(
            path=path,
            query=query_string or inline_query,
            page_name=page_name,
            parts=parts,
        )

    def get_url_part(self, number: int | str) -> str | None:
        """Return a 1-indexed URL part, or None when out of range.

        For "/a/b", part 1 is "a" and part 2 is "b". Numeric strings such
        as "2" are accepted; anything else that isn't a number gives None.
        """
        try:
            number = int(number)
        except (TypeError, ValueError):
            return None
        if number < 1 or number > len(self.parts):
            return None
        return self.parts[number - 1]
