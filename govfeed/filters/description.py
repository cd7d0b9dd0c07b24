"""Plain-English descriptions of filtered feeds.

``FeedDescriptionBuilder`` reads a feed URL back into the sentence a reader
would use for it. The sentence is assembled from up to four fragments, in a
fixed order and separated by single spaces:

* **leading**: the lower-cased publication or announcement type when one is
  filtered on, otherwise the global list name (``documents``,
  ``publications``, ``announcements``) or the display name of the entity the
  feed belongs to;
* **parameters**: ``related to`` followed by the labels of the remaining
  filters, e.g. ``related to Ministry of Justice and Crime``;
* **official documents**: e.g. ``which are command papers``;
* **local government**: ``which are`` / ``and are relevant to local
  government``.

Entity names come from resolvers injected per entity kind. A resolver that
finds nothing drops the leading fragment instead of failing the description.

Usage
-----
::

    from govfeed.filters import FeedDescriptionBuilder
    from govfeed.taxonomy import TaxonomyIndex

    builder = FeedDescriptionBuilder.from_index(TaxonomyIndex.from_path(path))
    description = builder.build(
        "/government/publications.atom?departments[]=ministry-of-justice"
        "&official_document_status=command_papers_only"
    )
    description.text()
    # 'publications related to Ministry of Justice which are command papers'

"""

from __future__ import annotations

import dataclasses as dc
import functools
import typing as typ
from urllib.parse import urlsplit

import msgspec

from govfeed.common.sentence import to_sentence
from govfeed.logging import get_logger, log_warning
from govfeed.taxonomy import NAMED_ENTITY_KINDS

from .options import DEFAULT_LOCALE, FilterOptionsCatalog
from .query import param_present, param_values, parse_feed_query
from .routes import EntityFeed, FeedRoutes, GlobalFeed

if typ.TYPE_CHECKING:
    from collections import abc as cabc

    from govfeed.taxonomy import (
        ContentStore,
        EntityKind,
        TaxonomyIndex,
        TaxonomyLookup,
    )

    from .query import FeedParams
    from .routes import FeedSubject

__all__ = [
    "EntityResolver",
    "FeedDescription",
    "FeedDescriptionBuilder",
    "taxonomy_resolvers",
]

logger = get_logger(__name__)

type EntityResolver = cabc.Callable[[str], str | None]

PUBLICATION_FILTER_KEY = "publication_filter_option"
ANNOUNCEMENT_FILTER_KEY = "announcement_filter_option"
OFFICIAL_DOCUMENT_KEY = "official_document_status"
LOCAL_GOVERNMENT_KEY = "relevant_to_local_government"

UNLISTED_KEYS: typ.Final[frozenset[str]] = frozenset(
    {
        PUBLICATION_FILTER_KEY,
        ANNOUNCEMENT_FILTER_KEY,
        OFFICIAL_DOCUMENT_KEY,
        LOCAL_GOVERNMENT_KEY,
    }
)

OFFICIAL_DOCUMENT_CLAUSES: typ.Final[dict[str, str]] = {
    "command_and_act_papers": "which are command or act papers",
    "command_papers_only": "which are command papers",
    "act_papers_only": "which are act papers",
}


def _entity_name(
    lookup: TaxonomyLookup, kind: EntityKind, slug: str, *, locale: str | None
) -> str | None:
    record = lookup.find_by_slug(kind, slug, locale=locale)
    return None if record is None else record.name


def taxonomy_resolvers(
    lookup: TaxonomyLookup,
    content_store: ContentStore,
    *,
    locale: str | None = None,
) -> dict[EntityKind, EntityResolver]:
    """Build one name resolver per entity kind.

    Named entities resolve through ``lookup``, in ``locale`` where the
    taxonomy translates them; policies resolve to the title of their
    published edition through ``content_store``.
    """
    resolvers: dict[EntityKind, EntityResolver] = {
        kind: functools.partial(_entity_name, lookup, kind, locale=locale)
        for kind in NAMED_ENTITY_KINDS
    }
    resolvers["policy"] = content_store.published_edition_title
    return resolvers


@dc.dataclass(frozen=True, slots=True)
class FeedDescription:
    """Classified feed URL and its description.

    Attributes
    ----------
    feed_url
        The URL the description was built from.
    subject
        What the feed lists: a global document list or a single entity.
    feed_params
        Query parameters parsed from the URL.
    fragments
        Non-empty sentence fragments, in order.

    """

    feed_url: str
    subject: FeedSubject
    feed_params: FeedParams
    fragments: tuple[str, ...]

    @property
    def feed_type(self) -> str:
        """Return the subject kind, e.g. ``publications`` or ``organisation``."""
        return self.subject.kind

    @property
    def feed_object_slug(self) -> str | None:
        """Return the entity slug, or ``None`` for global feeds."""
        return self.subject.slug if isinstance(self.subject, EntityFeed) else None

    def text(self) -> str:
        """Return the description sentence."""
        return " ".join(self.fragments)

    def to_builtins(self) -> dict[str, typ.Any]:
        """Return a JSON-compatible representation."""
        return {
            "text": self.text(),
            "feed_type": self.feed_type,
            "feed_object_slug": self.feed_object_slug,
            "feed_params": msgspec.to_builtins(self.feed_params),
        }


class FeedDescriptionBuilder:
    """Classify feed URLs and describe their filters.

    Parameters
    ----------
    catalog
        Filter option catalog used to label query parameter values.
    resolvers
        Display-name resolver for each entity kind.
    routes
        Routing table used to classify feed paths.

    """

    def __init__(
        self,
        catalog: FilterOptionsCatalog,
        resolvers: cabc.Mapping[EntityKind, EntityResolver],
        *,
        routes: FeedRoutes | None = None,
    ) -> None:
        """Configure the builder with its collaborators."""
        self._catalog = catalog
        self._resolvers = dict(resolvers)
        self._routes = routes or FeedRoutes()

    @classmethod
    def from_index(
        cls,
        index: TaxonomyIndex,
        *,
        locale: str = DEFAULT_LOCALE,
        routes: FeedRoutes | None = None,
    ) -> FeedDescriptionBuilder:
        """Build a builder whose catalog and resolvers share ``index``."""
        return cls(
            FilterOptionsCatalog(index, locale=locale),
            taxonomy_resolvers(index, index, locale=locale),
            routes=routes,
        )

    @property
    def catalog(self) -> FilterOptionsCatalog:
        """Return the filter option catalog."""
        return self._catalog

    def build(self, feed_url: str) -> FeedDescription:
        """Classify ``feed_url`` and describe its filters.

        Raises
        ------
        UnrecognizedFeedError
            If the URL path matches no feed route.

        """
        parts = urlsplit(feed_url)
        subject = self._routes.classify(parts.path)
        params = parse_feed_query(parts.query)

        official_documents = self._official_document_fragment(params)
        candidates = (
            self._leading_fragment(subject, params),
            self._parameter_fragment(params),
            official_documents,
            self._local_government_fragment(
                params, follows_clause=official_documents is not None
            ),
        )
        return FeedDescription(
            feed_url=feed_url,
            subject=subject,
            feed_params=params,
            fragments=tuple(fragment for fragment in candidates if fragment),
        )

    def _labels(self, params: FeedParams, key: str) -> list[str]:
        labels = (
            self._catalog.label_for(key, value) for value in param_values(params, key)
        )
        return [label for label in labels if label is not None]

    def _leading_fragment(self, subject: FeedSubject, params: FeedParams) -> str | None:
        for key in (PUBLICATION_FILTER_KEY, ANNOUNCEMENT_FILTER_KEY):
            if param_present(params, key):
                labels = self._labels(params, key)
                if labels:
                    return ", ".join(labels).lower()

        if isinstance(subject, GlobalFeed):
            return subject.kind

        return self._entity_name(subject)

    def _entity_name(self, subject: EntityFeed) -> str | None:
        resolver = self._resolvers.get(subject.kind)
        name = resolver(subject.slug) if resolver is not None else None
        if name is None:
            log_warning(
                logger,
                "No %s found for slug %r; describing feed without its subject",
                subject.kind,
                subject.slug,
            )
        return name

    def _parameter_fragment(self, params: FeedParams) -> str | None:
        described = [
            ", ".join(labels)
            for key in params
            if key not in UNLISTED_KEYS and (labels := self._labels(params, key))
        ]
        if not described:
            return None
        return "related to " + to_sentence(described)

    @staticmethod
    def _official_document_fragment(params: FeedParams) -> str | None:
        status = params.get(OFFICIAL_DOCUMENT_KEY)
        if not isinstance(status, str):
            return None
        return OFFICIAL_DOCUMENT_CLAUSES.get(status)

    @staticmethod
    def _local_government_fragment(
        params: FeedParams, *, follows_clause: bool
    ) -> str | None:
        # Only a missing value and the literal "0" count as false.
        value = params.get(LOCAL_GOVERNMENT_KEY)
        if value is None or value == "0":
            return None
        if follows_clause:
            return "and are relevant to local government"
        return "which are relevant to local government"
