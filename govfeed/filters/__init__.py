"""Document filter options and feed descriptions.

Feed URLs on the publishing site carry their filters as query parameters.
This package knows which parameters exist, what their values are called, and
how to read a whole feed URL back into a sentence.

Describe a feed::

    >>> from govfeed.filters import FeedDescriptionBuilder
    >>> builder = FeedDescriptionBuilder.from_index(index)
    >>> builder.build("/government/announcements.atom?topics[]=crime").text()
    'announcements related to Crime'

List the options of a filter::

    >>> builder.catalog.options_for("official_document").values()
    ['command_and_act_papers', 'command_papers_only', 'act_papers_only']

"""

from __future__ import annotations

from .description import (
    EntityResolver,
    FeedDescription,
    FeedDescriptionBuilder,
    taxonomy_resolvers,
)
from .errors import (
    FeedFilterError,
    UnknownDimensionError,
    UnknownFilterKeyError,
    UnrecognizedFeedError,
)
from .options import (
    FILTER_KEYS,
    FilterDimension,
    FilterOptionsCatalog,
    Option,
    OptionGroup,
    OptionSet,
)
from .query import FeedParams, parse_feed_query
from .routes import EntityFeed, FeedRoutes, FeedSubject, GlobalFeed

__all__ = [
    "FILTER_KEYS",
    "EntityFeed",
    "EntityResolver",
    "FeedDescription",
    "FeedDescriptionBuilder",
    "FeedFilterError",
    "FeedParams",
    "FeedRoutes",
    "FeedSubject",
    "FilterDimension",
    "FilterOptionsCatalog",
    "GlobalFeed",
    "Option",
    "OptionGroup",
    "OptionSet",
    "UnknownDimensionError",
    "UnknownFilterKeyError",
    "UnrecognizedFeedError",
    "parse_feed_query",
    "taxonomy_resolvers",
]
