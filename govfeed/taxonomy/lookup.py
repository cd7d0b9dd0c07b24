"""Read-only lookups over a loaded taxonomy.

Feed descriptions need two collaborators: a taxonomy lookup that resolves an
entity slug to its name, and a content store that resolves a policy document
slug to the title of its published edition. ``TaxonomyIndex`` implements both
over an in-memory :class:`~govfeed.taxonomy.models.Taxonomy`, and also serves
the entity lists the filter catalogue builds its option sets from.

Usage
-----
::

    from govfeed.taxonomy import TaxonomyIndex

    index = TaxonomyIndex.from_path("examples/taxonomy.yaml")
    index.find_by_slug("organisation", "ministry-of-justice")
    index.published_edition_title("welfare-reform")

"""

from __future__ import annotations

import typing as typ

import msgspec

from .defaults import ANNOUNCEMENT_FILTER_OPTIONS, PUBLICATION_FILTER_OPTIONS
from .loader import load_taxonomy

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import (
        Document,
        FilterOption,
        Organisation,
        Taxonomy,
        Topic,
        TopicalEvent,
        WorldLocation,
    )

EntityKind = typ.Literal[
    "organisation",
    "topic",
    "topical_event",
    "world_location",
    "person",
    "role",
    "policy",
]

NAMED_ENTITY_KINDS: tuple[EntityKind, ...] = (
    "organisation",
    "topic",
    "topical_event",
    "world_location",
    "person",
    "role",
)


class EntityRecord(msgspec.Struct, kw_only=True, frozen=True):
    """Name and kind of a taxonomy entity found by slug."""

    name: str
    type: EntityKind


class TaxonomyLookup(typ.Protocol):
    """Resolve taxonomy entities by slug."""

    def find_by_slug(
        self, kind: EntityKind, slug: str, *, locale: str | None = None
    ) -> EntityRecord | None:
        """Return the entity of ``kind`` with ``slug``, or ``None``."""
        ...


class ContentStore(typ.Protocol):
    """Resolve documents to the title of their published edition."""

    def published_edition_title(self, document_slug: str) -> str | None:
        """Return the published edition title, or ``None``."""
        ...


class TaxonomySource(typ.Protocol):
    """Entity lists consumed when building filter option sets."""

    def organisations(self) -> typ.Sequence[Organisation]:
        """Return all organisations."""
        ...

    def topics(self) -> typ.Sequence[Topic]:
        """Return all topics."""
        ...

    def topical_events(self) -> typ.Sequence[TopicalEvent]:
        """Return all topical events."""
        ...

    def world_locations(self) -> typ.Sequence[WorldLocation]:
        """Return all world locations."""
        ...

    def publication_filter_options(self) -> typ.Sequence[FilterOption]:
        """Return the publication types offered as filters."""
        ...

    def announcement_filter_options(self) -> typ.Sequence[FilterOption]:
        """Return the announcement types offered as filters."""
        ...


class TaxonomyIndex:
    """Slug-indexed, read-only view of a taxonomy."""

    def __init__(self, taxonomy: Taxonomy) -> None:
        """Index every entity list of ``taxonomy`` by slug."""
        self._taxonomy = taxonomy
        self._names: dict[EntityKind, dict[str, str]] = {
            "organisation": {o.slug: o.name for o in taxonomy.organisations},
            "topic": {t.slug: t.name for t in taxonomy.topics},
            "topical_event": {e.slug: e.name for e in taxonomy.topical_events},
            "world_location": {w.slug: w.name for w in taxonomy.world_locations},
            "person": {p.slug: p.name for p in taxonomy.people},
            "role": {r.slug: r.name for r in taxonomy.roles},
        }
        self._translations: dict[EntityKind, dict[str, dict[str, str]]] = {
            "organisation": {o.slug: o.translations for o in taxonomy.organisations},
            "world_location": {
                w.slug: w.translations for w in taxonomy.world_locations
            },
        }
        self._documents: dict[str, Document] = {
            document.slug: document for document in taxonomy.policies
        }

    @classmethod
    def from_path(cls, path: Path | str) -> TaxonomyIndex:
        """Load, validate and index the taxonomy file at ``path``."""
        return cls(load_taxonomy(path))

    @property
    def taxonomy(self) -> Taxonomy:
        """Return the indexed taxonomy."""
        return self._taxonomy

    def find_by_slug(
        self, kind: EntityKind, slug: str, *, locale: str | None = None
    ) -> EntityRecord | None:
        """Return the named entity of ``kind`` with ``slug``.

        Organisations and world locations are named in ``locale`` when they
        carry a translation for it; every other name is the default one.

        Policies are documents rather than named entities; their names come
        from :meth:`published_edition_title`. Asking for one here returns the
        published title when there is one.
        """
        if kind == "policy":
            title = self.published_edition_title(slug)
            return None if title is None else EntityRecord(name=title, type=kind)

        name = self._names.get(kind, {}).get(slug)
        if name is None:
            return None
        if locale is not None:
            translations = self._translations.get(kind, {}).get(slug, {})
            name = translations.get(locale, name)
        return EntityRecord(name=name, type=kind)

    def published_edition_title(self, document_slug: str) -> str | None:
        """Return the title of the document's published edition."""
        document = self._documents.get(document_slug)
        if document is None:
            return None
        edition = document.published_edition
        return None if edition is None else edition.title

    def organisations(self) -> typ.Sequence[Organisation]:
        """Return all organisations in file order."""
        return self._taxonomy.organisations

    def topics(self) -> typ.Sequence[Topic]:
        """Return all topics in file order."""
        return self._taxonomy.topics

    def topical_events(self) -> typ.Sequence[TopicalEvent]:
        """Return all topical events in file order."""
        return self._taxonomy.topical_events

    def world_locations(self) -> typ.Sequence[WorldLocation]:
        """Return all world locations in file order."""
        return self._taxonomy.world_locations

    def publication_filter_options(self) -> typ.Sequence[FilterOption]:
        """Return the configured publication types, or the built-in ones."""
        return self._taxonomy.publication_filter_options or PUBLICATION_FILTER_OPTIONS

    def announcement_filter_options(self) -> typ.Sequence[FilterOption]:
        """Return the configured announcement types, or the built-in ones."""
        return (
            self._taxonomy.announcement_filter_options or ANNOUNCEMENT_FILTER_OPTIONS
        )
