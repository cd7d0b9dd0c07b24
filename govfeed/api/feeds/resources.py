"""API resources for feed descriptions and filter options.

Routes
------
``GET /feeds/description?url=<feed url>``
    Describe a feed URL; see :class:`FeedDescriptionResource`.
``GET /filters/{dimension}``
    Option set of a filter dimension; see :class:`FilterOptionsResource`.
``GET /filters/keys/{key}/{value}``
    Whether a value is offered for a filter key; see
    :class:`FilterValueResource`.

"""

from __future__ import annotations

import typing as typ

import falcon
import msgspec

from govfeed.api.errors import InvalidInputError
from govfeed.filters import FILTER_KEYS, FilterDimension, FilterOptionsCatalog
from govfeed.filters.options import SUPPORTED_LOCALES

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from govfeed.filters import FeedDescriptionBuilder
    from govfeed.taxonomy import TaxonomySource

__all__ = [
    "CatalogProvider",
    "FeedDescriptionResource",
    "FilterOptionsResource",
    "FilterValueResource",
]


class CatalogProvider:
    """Hand out one filter catalog per locale over a shared taxonomy source."""

    def __init__(self, source: TaxonomySource, *, default_locale: str) -> None:
        """Configure the provider with a taxonomy source and fallback locale."""
        self._source = source
        self._default_locale = default_locale
        self._catalogs: dict[str, FilterOptionsCatalog] = {}

    def for_locale(self, locale: str | None) -> FilterOptionsCatalog:
        """Return the catalog for ``locale``.

        Missing and unsupported locales share the default locale's catalog,
        so at most one catalog exists per supported locale.
        """
        resolved = locale if locale in SUPPORTED_LOCALES else self._default_locale
        if resolved not in self._catalogs:
            self._catalogs[resolved] = FilterOptionsCatalog(
                self._source, locale=resolved
            )
        return self._catalogs[resolved]


class FeedDescriptionResource:
    """Describe the feed URL passed in the ``url`` query parameter."""

    def __init__(self, builder: FeedDescriptionBuilder) -> None:
        """Configure the resource with a description builder."""
        self._builder = builder

    async def on_get(self, req: Request, resp: Response) -> None:
        """Handle GET /feeds/description requests.

        Parameters
        ----------
        req
            Falcon request carrying the ``url`` query parameter.
        resp
            Falcon response populated with the description and the
            classified feed.

        Raises
        ------
        InvalidInputError
            If the ``url`` parameter is missing or blank.

        """
        feed_url = req.get_param("url")
        if feed_url is None or not feed_url.strip():
            raise InvalidInputError("a feed URL is required", field="url")

        description = self._builder.build(feed_url.strip())
        resp.media = description.to_builtins()
        resp.status = falcon.HTTP_200


class FilterOptionsResource:
    """Serve the option set of a filter dimension."""

    def __init__(self, catalogs: CatalogProvider) -> None:
        """Configure the resource with a per-locale catalog provider."""
        self._catalogs = catalogs

    async def on_get(self, req: Request, resp: Response, *, dimension: str) -> None:
        """Handle GET /filters/{dimension} requests.

        An optional ``locale`` query parameter selects the label language.
        Unknown dimensions raise ``UnknownDimensionError``, which the app maps
        to 404.
        """
        catalog = self._catalogs.for_locale(req.get_param("locale"))
        options = catalog.options_for(dimension)
        resp.media = {
            "dimension": dimension,
            "parameter_key": FILTER_KEYS[FilterDimension(dimension)],
            "locale": catalog.locale,
            **msgspec.to_builtins(options),
        }
        resp.status = falcon.HTTP_200


class FilterValueResource:
    """Report whether a value is offered for a filter parameter key."""

    def __init__(self, catalogs: CatalogProvider) -> None:
        """Configure the resource with a per-locale catalog provider."""
        self._catalogs = catalogs

    async def on_get(
        self,
        req: Request,
        resp: Response,
        *,
        key: str,
        value: str,
    ) -> None:
        """Handle GET /filters/keys/{key}/{value} requests."""
        catalog = self._catalogs.for_locale(req.get_param("locale"))
        label = catalog.label_for(key, value)
        resp.media = {
            "key": key,
            "value": value,
            "valid": label is not None,
            "label": label,
        }
        resp.status = falcon.HTTP_200
