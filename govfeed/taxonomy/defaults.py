"""Built-in publication and announcement filter options.

These are the document types the publishing site offers on its publication
and announcement finders. A taxonomy file may replace either list.
"""

from __future__ import annotations

from .models import FilterOption

PUBLICATION_FILTER_OPTIONS: tuple[FilterOption, ...] = (
    FilterOption(slug="policy-papers", label="Policy papers", group_key="Policy"),
    FilterOption(slug="consultations", label="Consultations", group_key="Policy"),
    FilterOption(
        slug="impact-assessments", label="Impact assessments", group_key="Policy"
    ),
    FilterOption(slug="guidance", label="Guidance", group_key="Guidance"),
    FilterOption(slug="forms", label="Forms", group_key="Guidance"),
    FilterOption(slug="maps", label="Maps", group_key="Guidance"),
    FilterOption(slug="regulation", label="Regulation", group_key="Guidance"),
    FilterOption(slug="statistics", label="Statistics", group_key="Research"),
    FilterOption(
        slug="research-and-analysis",
        label="Research and analysis",
        group_key="Research",
    ),
    FilterOption(
        slug="independent-reports", label="Independent reports", group_key="Research"
    ),
    FilterOption(
        slug="corporate-reports", label="Corporate reports", group_key="Corporate"
    ),
    FilterOption(slug="foi-releases", label="FOI releases", group_key="Corporate"),
    FilterOption(
        slug="transparency-data", label="Transparency data", group_key="Corporate"
    ),
    FilterOption(slug="international-treaties", label="International treaties"),
    FilterOption(slug="correspondence", label="Correspondence"),
)

ANNOUNCEMENT_FILTER_OPTIONS: tuple[FilterOption, ...] = (
    FilterOption(slug="press-releases", label="Press releases", group_key="News"),
    FilterOption(slug="news-stories", label="News stories", group_key="News"),
    FilterOption(slug="fatality-notices", label="Fatality notices", group_key="News"),
    FilterOption(slug="speeches", label="Speeches", group_key="Speeches"),
    FilterOption(slug="statements", label="Statements", group_key="Speeches"),
    FilterOption(
        slug="government-responses", label="Government responses", group_key="News"
    ),
)
