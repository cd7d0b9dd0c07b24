"""Application factory for the govfeed Falcon ASGI application.

``create_app()`` always registers the health probes. When a taxonomy index
is supplied it also mounts the feed description and filter option
endpoints.

Usage
-----
Create a health-only app::

    app = create_app()

Create a full app::

    from govfeed.api.app import AppDependencies, create_app
    from govfeed.taxonomy import TaxonomyIndex

    deps = AppDependencies(index=TaxonomyIndex.from_path("taxonomy.yaml"))
    app = create_app(deps)

"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import falcon.asgi

from govfeed.api.errors import (
    InvalidInputError,
    handle_invalid_input,
    handle_unknown_dimension,
    handle_unrecognized_feed,
)
from govfeed.api.health.resources import HealthResource, ReadyResource
from govfeed.filters import UnknownDimensionError, UnrecognizedFeedError
from govfeed.filters.options import DEFAULT_LOCALE
from govfeed.filters.routes import DEFAULT_PATH_PREFIX

if typ.TYPE_CHECKING:
    from govfeed.taxonomy import TaxonomyIndex

__all__ = ["AppDependencies", "create_app"]


@dc.dataclass(frozen=True, slots=True)
class AppDependencies:
    """Dependencies for the Falcon ASGI application.

    Attributes
    ----------
    index
        Loaded taxonomy. Without one only the health probes are served.
    locale
        Default locale for filter labels.
    feed_path_prefix
        Path prefix of the global feeds.

    """

    index: TaxonomyIndex | None = None
    locale: str = DEFAULT_LOCALE
    feed_path_prefix: str = DEFAULT_PATH_PREFIX


def _add_feed_routes(app: falcon.asgi.App, dependencies: AppDependencies) -> None:
    from govfeed.api.feeds.resources import (
        CatalogProvider,
        FeedDescriptionResource,
        FilterOptionsResource,
        FilterValueResource,
    )
    from govfeed.filters import FeedDescriptionBuilder, FeedRoutes

    index = typ.cast("TaxonomyIndex", dependencies.index)
    catalogs = CatalogProvider(index, default_locale=dependencies.locale)
    builder = FeedDescriptionBuilder.from_index(
        index,
        locale=dependencies.locale,
        routes=FeedRoutes(dependencies.feed_path_prefix),
    )

    app.add_route("/feeds/description", FeedDescriptionResource(builder))
    app.add_route("/filters/{dimension}", FilterOptionsResource(catalogs))
    app.add_route("/filters/keys/{key}/{value}", FilterValueResource(catalogs))


def create_app(
    dependencies: AppDependencies | None = None,
) -> falcon.asgi.App:
    """Create and configure the Falcon ASGI application.

    Parameters
    ----------
    dependencies
        Optional application dependencies. When ``None`` or without a
        taxonomy index, only ``/health`` and ``/ready`` are available.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    has_taxonomy = dependencies is not None and dependencies.index is not None

    app = falcon.asgi.App()

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource(taxonomy_loaded=has_taxonomy))

    if has_taxonomy and dependencies is not None:
        _add_feed_routes(app, dependencies)

    app.add_error_handler(InvalidInputError, handle_invalid_input)
    app.add_error_handler(UnrecognizedFeedError, handle_unrecognized_feed)
    app.add_error_handler(UnknownDimensionError, handle_unknown_dimension)

    return app
