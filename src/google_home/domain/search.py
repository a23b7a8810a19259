"""Search query formatting and search URL construction.

Nothing here talks to the network: :meth:`BasicSearch.search` only builds
the URL a browser would open.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final
from urllib.parse import urlencode

from .enums import URLTarget
from .errors import ValidationError

DEFAULT_SEARCH_ENGINE: Final[str] = "Google"
ANONYMOUS_USERNAME: Final[str] = "Anonymous"

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True, slots=True)
class SearchEngine:
    """Where and how a search engine expects its query.

    Example:
        >>> SearchEngine("Bing", "https://www.bing.com/search", "q").build_url("cats")
        'https://www.bing.com/search?q=cats'
    """

    name: str
    endpoint: str
    query_param: str = "q"

    def build_url(self, query: str) -> str:
        """Return the endpoint with ``query`` form-encoded as the query parameter."""
        return f"{self.endpoint}?{urlencode({self.query_param: query})}"


SEARCH_ENGINES: Final[Mapping[str, SearchEngine]] = MappingProxyType(
    {
        "google": SearchEngine("Google", "https://www.google.com/search"),
        "bing": SearchEngine("Bing", "https://www.bing.com/search"),
        "duckduckgo": SearchEngine("DuckDuckGo", "https://duckduckgo.com/"),
        "yahoo": SearchEngine("Yahoo", "https://search.yahoo.com/search", "p"),
        "ecosia": SearchEngine("Ecosia", "https://www.ecosia.org/search"),
    }
)


def resolve_engine(name: str) -> SearchEngine:
    """Look up a search engine by name, case-insensitively.

    Unknown names fall back to ``https://www.<slug>.com/search?q=``.

    Raises:
        ValidationError: When the name has no letters or digits to build a
            fallback host from.

    Example:
        >>> resolve_engine("duckDuckGo").name
        'DuckDuckGo'
        >>> resolve_engine("Ask Jeeves").endpoint
        'https://www.askjeeves.com/search'
    """
    key = name.strip().lower()
    known = SEARCH_ENGINES.get(key)
    if known is not None:
        return known
    slug = _NON_SLUG_CHARS.sub("", key)
    if not slug:
        raise ValidationError(
            f"Search engine {name!r} has no usable name: expected letters or digits",
            expected="a search engine name",
            actual=name,
        )
    return SearchEngine(name, f"https://www.{slug}.com/search")


def parse_target(target: URLTarget | str) -> URLTarget:
    """Coerce ``target`` into a :class:`URLTarget`.

    Raises:
        ValidationError: When ``target`` is not one of the four keywords.

    Example:
        >>> parse_target("_self")
        <URLTarget.SELF: '_self'>
    """
    try:
        return URLTarget(target)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in URLTarget)
        raise ValidationError(
            f"Invalid target {target!r}: expected one of {allowed}",
            expected=tuple(member.value for member in URLTarget),
            actual=target,
        ) from exc


@dataclass(frozen=True, slots=True)
class SearchResult:
    """URL built by :meth:`BasicSearch.search` and the context to open it in."""

    url: str
    target: URLTarget

    def as_dict(self) -> dict[str, str]:
        """Return a plain mapping suitable for JSON output.

        Example:
            >>> SearchResult("https://example.com/?q=x", URLTarget.TOP).as_dict()
            {'url': 'https://example.com/?q=x', 'target': '_top'}
        """
        return {"url": self.url, "target": self.target.value}


@dataclass(frozen=True, slots=True)
class BasicSearch:
    """A user's query bound to the search engine they use.

    Args:
        query: What the user wants to search for.
        search_engine: Engine name. None or a blank name means Google.

    Example:
        >>> search = BasicSearch("cats", "Bing")
        >>> search.format_query("Ada")
        'Ada searched for: cats'
        >>> search.search("_blank")
        SearchResult(url='https://www.bing.com/search?q=cats', target=<URLTarget.BLANK: '_blank'>)
    """

    query: str
    search_engine: str | None = DEFAULT_SEARCH_ENGINE

    def __post_init__(self) -> None:
        if self.search_engine is None or not self.search_engine.strip():
            object.__setattr__(self, "search_engine", DEFAULT_SEARCH_ENGINE)

    def format_query(self, username: str | None = None) -> str:
        """Describe the query on behalf of ``username`` (default *Anonymous*)."""
        return f"{username or ANONYMOUS_USERNAME} searched for: {self.query}"

    def search(self, target: URLTarget | str) -> SearchResult:
        """Build the search URL for this query.

        No request is sent, so a returned URL says nothing about whether the
        search itself would succeed.

        Args:
            target: Browsing context: ``_blank``, ``_self``, ``_parent`` or ``_top``.

        Raises:
            ValidationError: When ``target`` is not an allowed keyword or the
                engine name is unusable.
        """
        url_target = parse_target(target)
        engine = resolve_engine(self.search_engine or DEFAULT_SEARCH_ENGINE)
        return SearchResult(url=engine.build_url(self.query), target=url_target)


__all__ = [
    "ANONYMOUS_USERNAME",
    "DEFAULT_SEARCH_ENGINE",
    "SEARCH_ENGINES",
    "BasicSearch",
    "SearchEngine",
    "SearchResult",
    "parse_target",
    "resolve_engine",
]
