"""Shared fixtures for govfeed tests."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest

from govfeed.filters import (
    FeedDescriptionBuilder,
    FilterOptionsCatalog,
    taxonomy_resolvers,
)
from govfeed.taxonomy import TaxonomyIndex

REPO_ROOT = Path(__file__).resolve().parents[1]

# Two of the example topical events are still running on this day, one has
# ended.
CATALOG_DAY = dt.date(2013, 7, 1)


@pytest.fixture
def repo_root() -> Path:
    """Return the repository root."""
    return REPO_ROOT


@pytest.fixture
def taxonomy_path(repo_root: Path) -> Path:
    """Return the path of the example taxonomy."""
    return repo_root / "examples" / "taxonomy.yaml"


@pytest.fixture
def index(taxonomy_path: Path) -> TaxonomyIndex:
    """Load and index the example taxonomy."""
    return TaxonomyIndex.from_path(taxonomy_path)


@pytest.fixture
def catalog(index: TaxonomyIndex) -> FilterOptionsCatalog:
    """Return an English catalog pinned to a fixed day."""
    return FilterOptionsCatalog(index, today=lambda: CATALOG_DAY)


@pytest.fixture
def builder(
    index: TaxonomyIndex, catalog: FilterOptionsCatalog
) -> FeedDescriptionBuilder:
    """Return a description builder over the example taxonomy."""
    return FeedDescriptionBuilder(catalog, taxonomy_resolvers(index, index))
