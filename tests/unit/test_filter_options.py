"""Unit tests for the filter options catalog.

Run with:
    pytest tests/unit/test_filter_options.py
"""

from __future__ import annotations

import datetime as dt

import pytest

from govfeed.filters import (
    FILTER_KEYS,
    FilterDimension,
    FilterOptionsCatalog,
    Option,
    OptionGroup,
    OptionSet,
    UnknownDimensionError,
    UnknownFilterKeyError,
)
from govfeed.taxonomy import FilterOption, Organisation, Taxonomy, TaxonomyIndex


def _group_values(options: OptionSet) -> dict[str, list[str]]:
    return {
        group.label: [option.value for option in group.options]
        for group in options.grouped
    }


class TestFilterKeys:
    """Tests for the dimension to parameter key mapping."""

    def test_keys_are_a_bijection(self) -> None:
        """Every dimension has exactly one distinct parameter key."""
        assert set(FILTER_KEYS) == set(FilterDimension), "Expected every dimension"
        assert len(set(FILTER_KEYS.values())) == len(FilterDimension), (
            "Expected distinct parameter keys"
        )

    @pytest.mark.parametrize(
        ("key", "dimension"),
        [
            ("document_type", FilterDimension.DOCUMENT_TYPE),
            ("publication_filter_option", FilterDimension.PUBLICATION_TYPE),
            ("departments", FilterDimension.ORGANISATION),
            ("topics", FilterDimension.TOPIC),
            ("announcement_filter_option", FilterDimension.ANNOUNCEMENT_TYPE),
            ("official_document_status", FilterDimension.OFFICIAL_DOCUMENT),
            ("world_locations", FilterDimension.LOCATION),
        ],
    )
    def test_dimension_for_key(self, key: str, dimension: FilterDimension) -> None:
        """Parameter keys resolve to their dimension."""
        assert FilterOptionsCatalog.dimension_for_key(key) is dimension
        assert FilterOptionsCatalog.is_valid_filter_key(key)
        assert not FilterOptionsCatalog.is_invalid_filter_key(key)

    @pytest.mark.parametrize("key", ["page", "relevant_to_local_government", ""])
    def test_unknown_keys(self, key: str) -> None:
        """Keys outside the table are invalid."""
        assert FilterOptionsCatalog.is_invalid_filter_key(key)
        assert not FilterOptionsCatalog.is_valid_filter_key(key)
        with pytest.raises(UnknownFilterKeyError):
            FilterOptionsCatalog.dimension_for_key(key)

    def test_valid_dimensions(self) -> None:
        """Dimension names are recognised by value."""
        assert FilterOptionsCatalog.is_valid_dimension("location")
        assert not FilterOptionsCatalog.is_valid_dimension("world_locations")


class TestOptionSet:
    """Tests for OptionSet helpers."""

    def test_from_ungrouped_groups_by_first_appearance(self) -> None:
        """Grouped entries keep their order; ungrouped ones stay flat."""
        options = OptionSet.from_ungrouped(
            "All things",
            [
                ("Beta", "beta", "Second"),
                ("Alpha", "alpha", None),
                ("Gamma", "gamma", "First"),
                ("Delta", "delta", "Second"),
            ],
        )
        assert options.ungrouped == (Option("Alpha", "alpha"),)
        assert options.grouped == (
            OptionGroup("Second", (Option("Beta", "beta"), Option("Delta", "delta"))),
            OptionGroup("First", (Option("Gamma", "gamma"),)),
        ), "Expected groups in order of first appearance"

    def test_values_list_ungrouped_first(self) -> None:
        """values() lists ungrouped options before grouped ones."""
        options = OptionSet(
            all_label="All",
            ungrouped=(Option("Flat", "flat"),),
            grouped=(OptionGroup("G", (Option("Nested", "nested"),)),),
        )
        assert options.values() == ["flat", "nested"], "Expected display order"

    def test_label_for(self) -> None:
        """Labels resolve for offered values, the "all" value and nothing else."""
        options = OptionSet(all_label="All", ungrouped=(Option("Flat", "flat"),))
        assert options.label_for("flat") == "Flat"
        assert options.label_for("all") == "All"
        assert options.label_for("missing") is None


class TestCatalogOptionSets:
    """Tests for the option sets built from the example taxonomy."""

    def test_document_types(self, catalog: FilterOptionsCatalog) -> None:
        """Document types are a fixed flat list."""
        options = catalog.options_for(FilterDimension.DOCUMENT_TYPE)
        assert options.all_label == "All document types"
        assert options.values() == ["announcements", "policies", "publications"]

    def test_official_documents(self, catalog: FilterOptionsCatalog) -> None:
        """Official document statuses are a fixed flat list."""
        options = catalog.options_for("official_document")
        assert options.all_label == "All documents"
        assert options.values() == [
            "command_and_act_papers",
            "command_papers_only",
            "act_papers_only",
        ]

    def test_publication_types_are_sorted_then_grouped(
        self, catalog: FilterOptionsCatalog
    ) -> None:
        """Publication types sort by label and group by first appearance."""
        options = catalog.options_for("publication_type")
        assert options.all_label == "All publication types"
        assert [option.value for option in options.ungrouped] == [
            "correspondence",
            "international-treaties",
        ], "Expected ungrouped types in label order"
        groups = _group_values(options)
        assert list(groups) == ["Policy", "Corporate", "Guidance", "Research"]
        assert groups["Policy"] == [
            "consultations",
            "impact-assessments",
            "policy-papers",
        ]
        assert groups["Research"] == [
            "independent-reports",
            "research-and-analysis",
            "statistics",
        ]

    def test_announcement_types(self, catalog: FilterOptionsCatalog) -> None:
        """Announcement types group into news and speeches."""
        options = catalog.options_for("announcement_type")
        assert options.all_label == "All announcement types"
        assert _group_values(options) == {
            "News": [
                "fatality-notices",
                "government-responses",
                "news-stories",
                "press-releases",
            ],
            "Speeches": ["speeches", "statements"],
        }

    def test_organisations(self, catalog: FilterOptionsCatalog) -> None:
        """Organisations group into ministerial, other and closed."""
        options = catalog.options_for("organisation")
        assert options.all_label == "All departments"
        assert _group_values(options) == {
            "Ministerial departments": [
                "cabinet-office",
                "hm-treasury",
                "home-office",
                "ministry-of-justice",
            ],
            "Other departments & public bodies": [
                "environment-agency",
                "the-national-archives",
            ],
            "Closed organisations": [
                "department-for-children-schools-and-families",
            ],
        }

    def test_organisations_sort_ignoring_leading_the(self) -> None:
        """A leading "The" is ignored when sorting."""
        taxonomy = Taxonomy(
            version=1,
            organisations=[
                Organisation(slug="the-water-board", name="The Water Board"),
                Organisation(slug="treasury-solicitor", name="Treasury Solicitor"),
            ],
        )
        catalog = FilterOptionsCatalog(TaxonomyIndex(taxonomy))
        other = _group_values(catalog.options_for("organisation"))[
            "Other departments & public bodies"
        ]
        assert other == ["treasury-solicitor", "the-water-board"], (
            "Expected 'The Water Board' to sort under W"
        )

    def test_topics_and_active_topical_events(
        self, catalog: FilterOptionsCatalog
    ) -> None:
        """Topics sort by name; active events follow, most recent first."""
        options = catalog.options_for("topic")
        assert options.all_label == "All topics"
        assert _group_values(options) == {
            "Topics": ["climate-change", "crime-and-policing", "welfare"],
            "Topical events": ["spending-round-2013", "g8-2013"],
        }

    def test_ended_events_are_offered_before_they_end(
        self, index: TaxonomyIndex
    ) -> None:
        """An event is offered up to and including its end date."""
        catalog = FilterOptionsCatalog(index, today=lambda: dt.date(2012, 9, 9))
        events = _group_values(catalog.options_for("topic"))["Topical events"]
        assert "london-2012" in events, "Expected the event on its last day"

    def test_topical_events_follow_the_clock(self, index: TaxonomyIndex) -> None:
        """The same catalog drops events once the date moves past their end."""
        clock = {"today": dt.date(2012, 9, 9)}
        catalog = FilterOptionsCatalog(index, today=lambda: clock["today"])

        first = catalog.options_for("topic")
        assert "london-2012" in _group_values(first)["Topical events"]
        assert catalog.options_for("topic") is first, "Expected a same-day cache hit"

        clock["today"] = dt.date(2012, 9, 10)
        later = _group_values(catalog.options_for("topic"))["Topical events"]
        assert "london-2012" not in later, "Expected the ended event to disappear"
        assert catalog.label_for("topics", "london-2012") is None

    def test_locations(self, catalog: FilterOptionsCatalog) -> None:
        """Locations form a flat list sorted by name."""
        options = catalog.options_for("location")
        assert options.all_label == "All locations"
        assert options.values() == ["afghanistan", "france", "spain"]
        assert options.grouped == ()

    def test_welsh_locale(self, index: TaxonomyIndex) -> None:
        """Localised names and the location "all" label follow the locale."""
        catalog = FilterOptionsCatalog(index, locale="cy")
        locations = catalog.options_for("location")
        assert locations.all_label == "Pob lleoliad"
        assert [option.label for option in locations.options()] == [
            "Afghanistan",
            "Ffrainc",
            "Sbaen",
        ]
        assert catalog.label_for("departments", "ministry-of-justice") == (
            "Y Weinyddiaeth Gyfiawnder"
        )
        ministerial = _group_values(catalog.options_for("organisation"))[
            "Ministerial departments"
        ]
        assert ministerial[-1] == "ministry-of-justice", (
            "Expected the Welsh name to sort last"
        )

    def test_unknown_locale_falls_back_to_english_labels(
        self, index: TaxonomyIndex
    ) -> None:
        """Unknown locales use the default names and labels."""
        catalog = FilterOptionsCatalog(index, locale="xx")
        assert catalog.options_for("location").all_label == "All locations"
        assert catalog.label_for("world_locations", "spain") == "Spain"

    def test_unknown_dimension_raises(self, catalog: FilterOptionsCatalog) -> None:
        """Unknown dimensions raise UnknownDimensionError."""
        with pytest.raises(UnknownDimensionError) as excinfo:
            catalog.options_for("colour")
        assert excinfo.value.dimension == "colour"

    def test_option_sets_are_cached(self, catalog: FilterOptionsCatalog) -> None:
        """Repeated requests return the same option set."""
        first = catalog.options_for("organisation")
        assert catalog.options_for(FilterDimension.ORGANISATION) is first

    def test_options_for_parameter_key(self, catalog: FilterOptionsCatalog) -> None:
        """Parameter keys resolve to their dimension's options."""
        assert catalog.options_for_parameter_key("world_locations") is (
            catalog.options_for("location")
        )
        with pytest.raises(UnknownFilterKeyError):
            catalog.options_for_parameter_key("page")


class TestLabelFor:
    """Tests for label lookups by parameter key and value."""

    @pytest.mark.parametrize(
        ("key", "value", "expected"),
        [
            ("departments", "home-office", "Home Office"),
            ("departments", "all", "All departments"),
            ("topics", "crime-and-policing", "Crime and policing"),
            ("topics", "g8-2013", "G8 2013"),
            ("topics", "london-2012", None),
            ("world_locations", "france", "France"),
            ("publication_filter_option", "statistics", "Statistics"),
            ("announcement_filter_option", "press-releases", "Press releases"),
            ("official_document_status", "act_papers_only", "Act papers only"),
            ("document_type", "policies", "Policies"),
            ("departments", "no-such-department", None),
            ("page", "2", None),
        ],
    )
    def test_label_for(
        self,
        catalog: FilterOptionsCatalog,
        key: str,
        value: str,
        expected: str | None,
    ) -> None:
        """Labels resolve for offered values only."""
        assert catalog.label_for(key, value) == expected, (
            f"Unexpected label for {key}={value}"
        )

    def test_is_valid_key_value(self, catalog: FilterOptionsCatalog) -> None:
        """Key and value pairs are valid when the value is offered."""
        assert catalog.is_valid_key_value("topics", "welfare")
        assert not catalog.is_valid_key_value("topics", "nonsense")
        assert not catalog.is_valid_key_value("page", "1")


def test_taxonomy_filter_options_override_defaults() -> None:
    """A taxonomy can replace the built-in publication types."""
    taxonomy = Taxonomy(
        version=1,
        publication_filter_options=[
            FilterOption(slug="white-papers", label="White papers", group_key="Policy"),
            FilterOption(slug="bulletins", label="Bulletins"),
        ],
    )
    catalog = FilterOptionsCatalog(TaxonomyIndex(taxonomy))
    options = catalog.options_for("publication_type")
    assert options.values() == ["bulletins", "white-papers"]
    assert catalog.label_for("publication_filter_option", "statistics") is None
    assert catalog.label_for("announcement_filter_option", "speeches") == "Speeches"
