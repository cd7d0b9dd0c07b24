"""Describe filtered government publishing feeds in plain English.

Quick example::

    >>> from govfeed import FeedDescriptionBuilder, TaxonomyIndex
    >>> index = TaxonomyIndex.from_path("examples/taxonomy.yaml")
    >>> builder = FeedDescriptionBuilder.from_index(index)
    >>> builder.build("/government/organisations/ministry-of-justice.atom").text()
    'Ministry of Justice'

"""

from __future__ import annotations

from govfeed.filters import (
    FeedDescription,
    FeedDescriptionBuilder,
    FilterDimension,
    FilterOptionsCatalog,
)
from govfeed.taxonomy import TaxonomyIndex, load_taxonomy

__all__ = [
    "FeedDescription",
    "FeedDescriptionBuilder",
    "FilterDimension",
    "FilterOptionsCatalog",
    "TaxonomyIndex",
    "load_taxonomy",
]
