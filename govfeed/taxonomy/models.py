"""Typed taxonomy structures consumed by the filter catalogue."""

from __future__ import annotations

import datetime as dt
import typing as typ

import msgspec

OrganisationType = typ.Literal[
    "ministerial-department",
    "non-ministerial-department",
    "executive-agency",
    "executive-ndpb",
    "advisory-ndpb",
    "tribunal-ndpb",
    "public-corporation",
    "independent-monitoring-body",
    "ad-hoc-advisory-group",
    "other",
]

EditionState = typ.Literal[
    "draft",
    "submitted",
    "rejected",
    "scheduled",
    "published",
    "superseded",
    "archived",
    "deleted",
]


class Organisation(msgspec.Struct, kw_only=True):
    """Government organisation that documents can be filtered by.

    Attributes
    ----------
    slug : str
        Lowercase slug used in URLs and ``departments[]`` filters.
    name : str
        Default (English) name.
    type : OrganisationType
        Organisation classification. Ministerial departments are listed in
        their own filter group.
    closed : bool
        Closed organisations are listed after all open ones.
    translations : dict[str, str]
        Localised names keyed by locale code.

    """

    slug: str
    name: str
    type: OrganisationType = "other"
    closed: bool = False
    translations: dict[str, str] = msgspec.field(default_factory=dict)

    @property
    def ministerial_department(self) -> bool:
        """Return whether the organisation is a ministerial department."""
        return self.type == "ministerial-department"

    def name_for(self, locale: str) -> str:
        """Return the localised name, falling back to the default name."""
        return self.translations.get(locale, self.name)


class Topic(msgspec.Struct, kw_only=True):
    """Policy area used to classify documents."""

    slug: str
    name: str


class TopicalEvent(msgspec.Struct, kw_only=True):
    """Time-bound classification such as a summit or an emergency.

    Attributes
    ----------
    slug : str
        Lowercase slug used in URLs and ``topics[]`` filters.
    name : str
        Human-readable event name.
    start_date : date, optional
        Start of the event. Events are listed most recent first.
    end_date : date, optional
        End of the event. Events that have ended are not offered as filters
        but their feeds can still be described.

    """

    slug: str
    name: str
    start_date: dt.date | None = None
    end_date: dt.date | None = None

    def active_on(self, day: dt.date) -> bool:
        """Return whether the event has not yet ended on ``day``."""
        return self.end_date is None or self.end_date >= day


class WorldLocation(msgspec.Struct, kw_only=True):
    """Country or territory with its own feed."""

    slug: str
    name: str
    translations: dict[str, str] = msgspec.field(default_factory=dict)

    def name_for(self, locale: str) -> str:
        """Return the localised name, falling back to the default name."""
        return self.translations.get(locale, self.name)


class Person(msgspec.Struct, kw_only=True):
    """Minister or official with a personal feed."""

    slug: str
    name: str


class Role(msgspec.Struct, kw_only=True):
    """Ministerial role with a feed under ``/ministers``."""

    slug: str
    name: str


class Edition(msgspec.Struct, kw_only=True):
    """Versioned instance of a document.

    Only the title and the workflow state are tracked; the rest of the
    editorial workflow is out of scope.

    """

    title: str
    state: EditionState = "draft"


class Document(msgspec.Struct, kw_only=True):
    """Publishable document identified by slug, with its editions in order."""

    slug: str
    editions: list[Edition] = msgspec.field(default_factory=list)

    @property
    def published_edition(self) -> Edition | None:
        """Return the most recent published edition, if any."""
        return next(
            (
                edition
                for edition in reversed(self.editions)
                if edition.state == "published"
            ),
            None,
        )


class FilterOption(msgspec.Struct, kw_only=True, frozen=True):
    """Publication or announcement type offered as a filter.

    Attributes
    ----------
    slug : str
        Value used in ``publication_filter_option`` or
        ``announcement_filter_option`` query parameters.
    label : str
        Human-readable label; lower-cased when it leads a description.
    group_key : str, optional
        Group heading in the filter drop-down. Options without one are listed
        ungrouped.

    """

    slug: str
    label: str
    group_key: str | None = None


class Taxonomy(msgspec.Struct, kw_only=True):
    """Top-level taxonomy file.

    Attributes
    ----------
    version
        Schema version of the taxonomy file.
    organisations, topics, topical_events, world_locations, people, roles
        Taxonomy entities with their own feeds.
    policies
        Policy documents; their feeds are described by the title of the
        current published edition.
    publication_filter_options, announcement_filter_options
        Overrides for the built-in publication and announcement types. Empty
        lists select the built-in options.

    """

    version: int
    organisations: list[Organisation] = msgspec.field(default_factory=list)
    topics: list[Topic] = msgspec.field(default_factory=list)
    topical_events: list[TopicalEvent] = msgspec.field(default_factory=list)
    world_locations: list[WorldLocation] = msgspec.field(default_factory=list)
    people: list[Person] = msgspec.field(default_factory=list)
    roles: list[Role] = msgspec.field(default_factory=list)
    policies: list[Document] = msgspec.field(default_factory=list)
    publication_filter_options: list[FilterOption] = msgspec.field(
        default_factory=list
    )
    announcement_filter_options: list[FilterOption] = msgspec.field(
        default_factory=list
    )
