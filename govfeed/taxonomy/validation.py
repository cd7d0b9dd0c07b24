"""Validation rules for taxonomy files."""

from __future__ import annotations

import dataclasses
import re
import typing as typ

if typ.TYPE_CHECKING:
    from collections import abc as cabc

    from .models import Document, FilterOption, Taxonomy, TopicalEvent


SLUG_PATTERN = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,126}[a-z0-9])?$")


class _Named(typ.Protocol):
    slug: str
    name: str


class TaxonomyValidationError(ValueError):
    """Raised when a taxonomy fails structural validation."""

    def __init__(self, issues: list[str]) -> None:
        """Keep the individual issues alongside the aggregated message."""
        super().__init__("\n".join(issues))
        self.issues = issues


@dataclasses.dataclass(slots=True)
class ValidationState:
    """Issues collected while walking a taxonomy."""

    issues: list[str] = dataclasses.field(default_factory=list)


def validate_taxonomy(taxonomy: Taxonomy) -> Taxonomy:
    """Validate a taxonomy instance, returning it when all checks pass."""
    state = ValidationState()

    if taxonomy.version < 1:
        state.issues.append("taxonomy.version must be >= 1")

    _validate_entities("organisation", taxonomy.organisations, state)
    _validate_entities("world_location", taxonomy.world_locations, state)
    _validate_entities("person", taxonomy.people, state)
    _validate_entities("role", taxonomy.roles, state)
    _validate_entities("topic", taxonomy.topics, state)
    _validate_entities("topical_event", taxonomy.topical_events, state)
    _validate_shared_topic_slugs(taxonomy, state)

    for event in taxonomy.topical_events:
        _validate_event_dates(event, state)

    _validate_policies(taxonomy.policies, state)
    _validate_filter_options(
        "publication_filter_option", taxonomy.publication_filter_options, state
    )
    _validate_filter_options(
        "announcement_filter_option", taxonomy.announcement_filter_options, state
    )

    if state.issues:
        raise TaxonomyValidationError(state.issues)

    return taxonomy


def _validate_entities(
    kind: str, entities: cabc.Iterable[_Named], state: ValidationState
) -> None:
    seen: set[str] = set()
    for entity in entities:
        _validate_slug(entity.slug, f"{kind}.slug", state.issues)
        if entity.slug in seen:
            state.issues.append(f"duplicate {kind} slug '{entity.slug}'")
        seen.add(entity.slug)
        if not entity.name.strip():
            state.issues.append(f"{kind} {entity.slug} is missing a name")


def _validate_shared_topic_slugs(taxonomy: Taxonomy, state: ValidationState) -> None:
    # Topics and topical events share the ``topics[]`` filter parameter.
    topic_slugs = {topic.slug for topic in taxonomy.topics}
    state.issues.extend(
        f"topical_event slug '{event.slug}' clashes with a topic"
        for event in taxonomy.topical_events
        if event.slug in topic_slugs
    )


def _validate_event_dates(event: TopicalEvent, state: ValidationState) -> None:
    if (
        event.start_date is not None
        and event.end_date is not None
        and event.end_date < event.start_date
    ):
        state.issues.append(f"topical_event {event.slug} ends before it starts")


def _validate_policies(policies: list[Document], state: ValidationState) -> None:
    seen: set[str] = set()
    for policy in policies:
        _validate_slug(policy.slug, "policy.slug", state.issues)
        if policy.slug in seen:
            state.issues.append(f"duplicate policy slug '{policy.slug}'")
        seen.add(policy.slug)
        state.issues.extend(
            f"policy {policy.slug} has an edition without a title"
            for edition in policy.editions
            if not edition.title.strip()
        )


def _validate_filter_options(
    kind: str, options: list[FilterOption], state: ValidationState
) -> None:
    seen: set[str] = set()
    for option in options:
        _validate_slug(option.slug, f"{kind}.slug", state.issues)
        if option.slug in seen:
            state.issues.append(f"duplicate {kind} slug '{option.slug}'")
        seen.add(option.slug)
        if not option.label.strip():
            state.issues.append(f"{kind} {option.slug} is missing a label")


def _validate_slug(value: str, label: str, issues: list[str]) -> None:
    if not SLUG_PATTERN.match(value):
        issues.append(
            f"{label} '{value}' must match {SLUG_PATTERN.pattern} "
            "(lowercase slug with dashes)"
        )
