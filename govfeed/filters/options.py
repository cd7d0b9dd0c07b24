"""Labelled option sets for the document filter dimensions.

Each filter dimension (organisation, topic, publication type, ...) is
exposed on feed URLs through exactly one query parameter key, and offers an
option set: an "all" label plus labelled values, either flat or grouped under
headings. ``FilterOptionsCatalog`` builds those sets from a taxonomy source
and answers the reverse question feed descriptions ask: what is the label of
value ``v`` for parameter ``k``?

Usage
-----
::

    from govfeed.filters import FilterOptionsCatalog
    from govfeed.taxonomy import TaxonomyIndex

    catalog = FilterOptionsCatalog(TaxonomyIndex.from_path("taxonomy.yaml"))
    catalog.label_for("departments", "ministry-of-justice")
    # 'Ministry of Justice'
    catalog.label_for("page", "2")
    # None

"""

from __future__ import annotations

import datetime as dt
import enum
import re
import typing as typ

import msgspec

from .errors import UnknownDimensionError, UnknownFilterKeyError

if typ.TYPE_CHECKING:
    from collections import abc as cabc

    from govfeed.taxonomy import FilterOption, TaxonomySource


class FilterDimension(enum.StrEnum):
    """Named axis along which documents can be filtered."""

    DOCUMENT_TYPE = "document_type"
    PUBLICATION_TYPE = "publication_type"
    ORGANISATION = "organisation"
    TOPIC = "topic"
    ANNOUNCEMENT_TYPE = "announcement_type"
    OFFICIAL_DOCUMENT = "official_document"
    LOCATION = "location"


FILTER_KEYS: typ.Final[dict[FilterDimension, str]] = {
    FilterDimension.DOCUMENT_TYPE: "document_type",
    FilterDimension.PUBLICATION_TYPE: "publication_filter_option",
    FilterDimension.ORGANISATION: "departments",
    FilterDimension.TOPIC: "topics",
    FilterDimension.ANNOUNCEMENT_TYPE: "announcement_filter_option",
    FilterDimension.OFFICIAL_DOCUMENT: "official_document_status",
    FilterDimension.LOCATION: "world_locations",
}

_DIMENSIONS_BY_KEY: typ.Final[dict[str, FilterDimension]] = {
    key: dimension for dimension, key in FILTER_KEYS.items()
}

_DIMENSION_NAMES: typ.Final[frozenset[str]] = frozenset(
    dimension.value for dimension in FilterDimension
)

ALL_VALUE = "all"
DEFAULT_LOCALE = "en"

ALL_LOCATIONS_LABELS: typ.Final[dict[str, str]] = {
    "en": "All locations",
    "cy": "Pob lleoliad",
    "fr": "Tous les lieux",
    "es": "Todas las ubicaciones",
    "de": "Alle Standorte",
}

SUPPORTED_LOCALES: typ.Final[frozenset[str]] = frozenset(ALL_LOCATIONS_LABELS)

_LEADING_ARTICLE = re.compile(r"^the\s+", re.IGNORECASE)


class Option(msgspec.Struct, frozen=True):
    """Single labelled filter value."""

    label: str
    value: str


class OptionGroup(msgspec.Struct, frozen=True):
    """Options listed under a group heading."""

    label: str
    options: tuple[Option, ...] = ()


class OptionSet(msgspec.Struct, kw_only=True, frozen=True):
    """Options offered for one filter dimension.

    Attributes
    ----------
    all_label
        Label of the catch-all option, whose value is ``"all"``.
    ungrouped
        Options listed without a heading, in display order.
    grouped
        Headed groups of options, in display order.

    """

    all_label: str
    ungrouped: tuple[Option, ...] = ()
    grouped: tuple[OptionGroup, ...] = ()

    @classmethod
    def from_ungrouped(
        cls,
        all_label: str,
        entries: cabc.Iterable[tuple[str, str, str | None]],
    ) -> OptionSet:
        """Build a set from ``(label, value, group_key)`` entries.

        Entries without a group key stay ungrouped; the rest are collected
        under their group key, groups ordered by first appearance.
        """
        ungrouped: list[Option] = []
        groups: dict[str, list[Option]] = {}
        for label, value, group_key in entries:
            option = Option(label=label, value=value)
            if group_key is None:
                ungrouped.append(option)
            else:
                groups.setdefault(group_key, []).append(option)
        return cls(
            all_label=all_label,
            ungrouped=tuple(ungrouped),
            grouped=tuple(
                OptionGroup(label=group_label, options=tuple(options))
                for group_label, options in groups.items()
            ),
        )

    def options(self) -> cabc.Iterator[Option]:
        """Yield every option, ungrouped first, excluding the "all" option."""
        yield from self.ungrouped
        for group in self.grouped:
            yield from group.options

    def values(self) -> list[str]:
        """Return every option value in display order."""
        return [option.value for option in self.options()]

    def label_for(self, value: str) -> str | None:
        """Return the label for ``value``, or ``None`` when it is not offered."""
        if value == ALL_VALUE:
            return self.all_label
        return next(
            (option.label for option in self.options() if option.value == value),
            None,
        )


DOCUMENT_TYPE_OPTIONS = OptionSet(
    all_label="All document types",
    ungrouped=(
        Option("Announcements", "announcements"),
        Option("Policies", "policies"),
        Option("Publications", "publications"),
    ),
)

OFFICIAL_DOCUMENT_OPTIONS = OptionSet(
    all_label="All documents",
    ungrouped=(
        Option("Command or act papers", "command_and_act_papers"),
        Option("Command papers only", "command_papers_only"),
        Option("Act papers only", "act_papers_only"),
    ),
)


def _name_ignoring_prefix(name: str) -> str:
    return _LEADING_ARTICLE.sub("", name).casefold()


def _filter_option_entries(
    options: cabc.Iterable[FilterOption],
) -> list[tuple[str, str, str | None]]:
    return [
        (option.label, option.slug, option.group_key)
        for option in sorted(options, key=lambda option: option.label)
    ]


class FilterOptionsCatalog:
    """Option sets for every filter dimension, built from a taxonomy source.

    Parameters
    ----------
    source
        Entity lists backing the taxonomy-driven dimensions.
    locale
        Locale used for the location "all" label and for organisation and
        location names.
    today
        Clock used to decide which topical events are still active.

    """

    def __init__(
        self,
        source: TaxonomySource,
        *,
        locale: str = DEFAULT_LOCALE,
        today: cabc.Callable[[], dt.date] = dt.date.today,
    ) -> None:
        """Bind the catalog to a taxonomy source and locale."""
        self._source = source
        self._locale = locale
        self._today = today
        self._cache: dict[FilterDimension, OptionSet] = {}
        self._topics: tuple[dt.date, OptionSet] | None = None
        self._builders: dict[FilterDimension, cabc.Callable[[], OptionSet]] = {
            FilterDimension.DOCUMENT_TYPE: lambda: DOCUMENT_TYPE_OPTIONS,
            FilterDimension.PUBLICATION_TYPE: self._publication_type_options,
            FilterDimension.ORGANISATION: self._organisation_options,
            FilterDimension.ANNOUNCEMENT_TYPE: self._announcement_type_options,
            FilterDimension.OFFICIAL_DOCUMENT: lambda: OFFICIAL_DOCUMENT_OPTIONS,
            FilterDimension.LOCATION: self._location_options,
        }

    @property
    def locale(self) -> str:
        """Return the catalog locale."""
        return self._locale

    @staticmethod
    def is_valid_dimension(name: str) -> bool:
        """Return whether ``name`` is a filter dimension."""
        return name in _DIMENSION_NAMES

    @staticmethod
    def is_valid_filter_key(key: str) -> bool:
        """Return whether ``key`` is the parameter key of a dimension."""
        return key in _DIMENSIONS_BY_KEY

    @staticmethod
    def is_invalid_filter_key(key: str) -> bool:
        """Return whether ``key`` is not the parameter key of any dimension."""
        return key not in _DIMENSIONS_BY_KEY

    @staticmethod
    def dimension_for_key(key: str) -> FilterDimension:
        """Return the dimension whose parameter key is ``key``.

        Raises
        ------
        UnknownFilterKeyError
            If ``key`` is not a filter parameter key.

        """
        try:
            return _DIMENSIONS_BY_KEY[key]
        except KeyError:
            raise UnknownFilterKeyError(key) from None

    def options_for(self, dimension: FilterDimension | str) -> OptionSet:
        """Return the option set of ``dimension``.

        Option sets are cached per catalog. The topic set is cached per day,
        since its topical events group depends on the current date.

        Raises
        ------
        UnknownDimensionError
            If ``dimension`` is not one of the seven filter dimensions.

        """
        if not self.is_valid_dimension(dimension):
            raise UnknownDimensionError(str(dimension))
        resolved = FilterDimension(dimension)
        if resolved is FilterDimension.TOPIC:
            return self._topic_options_on(self._today())
        if resolved not in self._cache:
            self._cache[resolved] = self._builders[resolved]()
        return self._cache[resolved]

    def options_for_parameter_key(self, key: str) -> OptionSet:
        """Return the option set of the dimension behind parameter ``key``."""
        return self.options_for(self.dimension_for_key(key))

    def label_for(self, key: str, value: str) -> str | None:
        """Return the label of ``value`` for parameter ``key``.

        Unknown keys and unknown values both yield ``None``; callers skip the
        corresponding text instead of failing.
        """
        try:
            options = self.options_for_parameter_key(key)
        except UnknownFilterKeyError:
            return None
        return options.label_for(value)

    def is_valid_key_value(self, key: str, value: str) -> bool:
        """Return whether ``value`` is offered for parameter ``key``."""
        return self.label_for(key, value) is not None

    def _publication_type_options(self) -> OptionSet:
        return OptionSet.from_ungrouped(
            "All publication types",
            _filter_option_entries(self._source.publication_filter_options()),
        )

    def _announcement_type_options(self) -> OptionSet:
        return OptionSet.from_ungrouped(
            "All announcement types",
            _filter_option_entries(self._source.announcement_filter_options()),
        )

    def _organisation_options(self) -> OptionSet:
        ordered = sorted(
            self._source.organisations(),
            key=lambda org: _name_ignoring_prefix(org.name_for(self._locale)),
        )
        groups: dict[str, list[Option]] = {
            "Ministerial departments": [],
            "Other departments & public bodies": [],
            "Closed organisations": [],
        }
        for org in ordered:
            option = Option(org.name_for(self._locale), org.slug)
            if org.closed:
                groups["Closed organisations"].append(option)
            elif org.ministerial_department:
                groups["Ministerial departments"].append(option)
            else:
                groups["Other departments & public bodies"].append(option)
        return OptionSet(
            all_label="All departments",
            grouped=tuple(
                OptionGroup(label, tuple(options)) for label, options in groups.items()
            ),
        )

    def _topic_options_on(self, today: dt.date) -> OptionSet:
        if self._topics is None or self._topics[0] != today:
            self._topics = (today, self._topic_options(today))
        return self._topics[1]

    def _topic_options(self, today: dt.date) -> OptionSet:
        topics = sorted(self._source.topics(), key=lambda topic: topic.name.casefold())
        active = [
            event for event in self._source.topical_events() if event.active_on(today)
        ]
        events = sorted(
            active,
            key=lambda event: event.start_date or dt.date.min,
            reverse=True,
        )
        return OptionSet(
            all_label="All topics",
            grouped=(
                OptionGroup(
                    "Topics", tuple(Option(topic.name, topic.slug) for topic in topics)
                ),
                OptionGroup(
                    "Topical events",
                    tuple(Option(event.name, event.slug) for event in events),
                ),
            ),
        )

    def _location_options(self) -> OptionSet:
        locations = sorted(
            self._source.world_locations(),
            key=lambda location: location.name_for(self._locale).casefold(),
        )
        return OptionSet(
            all_label=ALL_LOCATIONS_LABELS.get(
                self._locale, ALL_LOCATIONS_LABELS[DEFAULT_LOCALE]
            ),
            ungrouped=tuple(
                Option(location.name_for(self._locale), location.slug)
                for location in locations
            ),
        )
