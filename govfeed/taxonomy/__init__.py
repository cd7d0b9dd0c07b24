"""Taxonomy models, loading, validation and lookups.

The taxonomy is the reference data behind feed descriptions: organisations,
topics, topical events, world locations, people, ministerial roles, policy
documents and the publication and announcement types.

Validate a taxonomy file::

    >>> from govfeed.taxonomy import load_taxonomy
    >>> taxonomy = load_taxonomy("examples/taxonomy.yaml")

Resolve entity names::

    >>> from govfeed.taxonomy import TaxonomyIndex
    >>> index = TaxonomyIndex(taxonomy)
    >>> index.find_by_slug("organisation", "ministry-of-justice").name
    'Ministry of Justice'

"""

from __future__ import annotations

from .defaults import ANNOUNCEMENT_FILTER_OPTIONS, PUBLICATION_FILTER_OPTIONS
from .loader import load_taxonomy
from .lookup import (
    NAMED_ENTITY_KINDS,
    ContentStore,
    EntityKind,
    EntityRecord,
    TaxonomyIndex,
    TaxonomyLookup,
    TaxonomySource,
)
from .models import (
    Document,
    Edition,
    FilterOption,
    Organisation,
    Person,
    Role,
    Taxonomy,
    Topic,
    TopicalEvent,
    WorldLocation,
)
from .schema import build_taxonomy_schema, write_taxonomy_schema
from .validation import TaxonomyValidationError, validate_taxonomy

__all__ = [
    "ANNOUNCEMENT_FILTER_OPTIONS",
    "NAMED_ENTITY_KINDS",
    "PUBLICATION_FILTER_OPTIONS",
    "ContentStore",
    "Document",
    "Edition",
    "EntityKind",
    "EntityRecord",
    "FilterOption",
    "Organisation",
    "Person",
    "Role",
    "Taxonomy",
    "TaxonomyIndex",
    "TaxonomyLookup",
    "TaxonomySource",
    "TaxonomyValidationError",
    "Topic",
    "TopicalEvent",
    "WorldLocation",
    "build_taxonomy_schema",
    "load_taxonomy",
    "validate_taxonomy",
    "write_taxonomy_schema",
]
