"""Classify feed URL paths into feed subjects.

A feed is either one of the three global document lists or the feed of a
single taxonomy entity. Classification walks an ordered routing table:

1. exact matches for the global feeds (``/government/feed.atom``,
   ``/government/publications.atom``, ``/government/announcements.atom``);
2. entity routes keyed on the second path component
   (``/government/organisations/<slug>.atom``), each with its own slug
   pattern; policies use ``/government/policies/<slug>/activity.atom``.

Anything else raises :class:`~govfeed.filters.errors.UnrecognizedFeedError`.

Usage
-----
::

    from govfeed.filters.routes import FeedRoutes

    routes = FeedRoutes()
    routes.classify("/government/world/france.atom")
    # EntityFeed(kind='world_location', slug='france')

"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

import msgspec

from govfeed.taxonomy import EntityKind

from .errors import UnrecognizedFeedError

GlobalKind = typ.Literal["documents", "publications", "announcements"]

DEFAULT_PATH_PREFIX = "/government"

ATOM_SLUG_PATTERN = re.compile(r"([^/]*)\.atom$")
ACTIVITY_SLUG_PATTERN = re.compile(r"([^/]*)/activity\.atom$")
PATH_PREFIX_PATTERN = re.compile(r"^/[^/]+/?$")


class GlobalFeed(msgspec.Struct, frozen=True, tag="global"):
    """One of the site-wide document lists."""

    kind: GlobalKind


class EntityFeed(msgspec.Struct, frozen=True, tag="entity"):
    """Feed of a single taxonomy entity or policy."""

    kind: EntityKind
    slug: str


type FeedSubject = GlobalFeed | EntityFeed


@dc.dataclass(frozen=True, slots=True)
class GlobalRoute:
    """Exact path of a global feed."""

    path: str
    kind: GlobalKind

    def match(self, path: str) -> GlobalFeed | None:
        """Return the subject when ``path`` is exactly this route's path."""
        return GlobalFeed(self.kind) if path == self.path else None


@dc.dataclass(frozen=True, slots=True)
class EntityRoute:
    """Entity feeds rooted at ``/<prefix>/<root>/``."""

    root: str
    kind: EntityKind
    slug_pattern: re.Pattern[str] = ATOM_SLUG_PATTERN

    def match(self, path: str) -> EntityFeed | None:
        """Return the subject when ``path`` sits under this route's root."""
        if _root_segment(path) != self.root:
            return None
        found = self.slug_pattern.search(path)
        if found is None:
            return None
        return EntityFeed(self.kind, found.group(1))


type Route = GlobalRoute | EntityRoute

ENTITY_ROUTES: tuple[EntityRoute, ...] = (
    EntityRoute("policies", "policy", ACTIVITY_SLUG_PATTERN),
    EntityRoute("organisations", "organisation"),
    EntityRoute("topics", "topic"),
    EntityRoute("topical-events", "topical_event"),
    EntityRoute("world", "world_location"),
    EntityRoute("people", "person"),
    EntityRoute("ministers", "role"),
)


def _root_segment(path: str) -> str | None:
    segments = path.split("/")
    return segments[2] if len(segments) > 2 else None


def global_routes(prefix: str = DEFAULT_PATH_PREFIX) -> tuple[GlobalRoute, ...]:
    """Return the global feed routes under ``prefix``.

    Entity routes read their root from the second path segment, so the
    prefix must be exactly one segment, e.g. ``/government``.

    Raises
    ------
    ValueError
        If ``prefix`` is not a single absolute path segment.

    """
    if PATH_PREFIX_PATTERN.match(prefix) is None:
        msg = (
            "feed path prefix must be one path segment like '/government', "
            f"got: {prefix!r}"
        )
        raise ValueError(msg)
    base = prefix.rstrip("/")
    return (
        GlobalRoute(f"{base}/feed.atom", "documents"),
        GlobalRoute(f"{base}/publications.atom", "publications"),
        GlobalRoute(f"{base}/announcements.atom", "announcements"),
    )


class FeedRoutes:
    """Ordered routing table from feed paths to feed subjects."""

    def __init__(
        self,
        prefix: str = DEFAULT_PATH_PREFIX,
        *,
        entity_routes: typ.Sequence[EntityRoute] = ENTITY_ROUTES,
    ) -> None:
        """Build the table: global routes first, then entity routes."""
        self._routes: tuple[Route, ...] = (*global_routes(prefix), *entity_routes)

    @property
    def routes(self) -> tuple[Route, ...]:
        """Return the routes in matching order."""
        return self._routes

    def path_for(self, kind: GlobalKind) -> str:
        """Return the path of the global feed of ``kind``."""
        return next(
            route.path
            for route in self._routes
            if isinstance(route, GlobalRoute) and route.kind == kind
        )

    def classify(self, path: str) -> FeedSubject:
        """Return the subject of the feed at ``path``.

        Raises
        ------
        UnrecognizedFeedError
            If no route matches ``path``.

        """
        for route in self._routes:
            subject = route.match(path)
            if subject is not None:
                return subject
        raise UnrecognizedFeedError(path)
