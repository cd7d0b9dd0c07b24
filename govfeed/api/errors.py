"""Domain exceptions and Falcon error handlers for the API layer.

Register the handlers on the Falcon app::

    app.add_error_handler(InvalidInputError, handle_invalid_input)
    app.add_error_handler(UnrecognizedFeedError, handle_unrecognized_feed)
    app.add_error_handler(UnknownDimensionError, handle_unknown_dimension)

"""

from __future__ import annotations

import typing as typ

import falcon

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from govfeed.filters import UnknownDimensionError, UnrecognizedFeedError

__all__ = [
    "InvalidInputError",
    "handle_invalid_input",
    "handle_unknown_dimension",
    "handle_unrecognized_feed",
]


class InvalidInputError(Exception):
    """Raised for client validation errors that should map to HTTP 400.

    Attributes
    ----------
    reason
        Human-readable description of the validation failure.
    field
        Optional name of the input field that failed validation.

    """

    def __init__(self, reason: str, *, field: str | None = None) -> None:
        """Initialize with a validation reason and optional field name."""
        self.reason = reason
        self.field = field
        message = f"{field}: {reason}" if field is not None else reason
        super().__init__(message)


async def handle_invalid_input(
    _req: Request,
    resp: Response,
    ex: InvalidInputError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``InvalidInputError`` to an HTTP 400 JSON response."""
    resp.status = falcon.HTTP_400
    media: dict[str, str] = {
        "title": "Invalid input",
        "description": ex.reason,
    }
    if ex.field is not None:
        media["field"] = ex.field
    resp.media = media


async def handle_unrecognized_feed(
    _req: Request,
    resp: Response,
    ex: UnrecognizedFeedError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``UnrecognizedFeedError`` to an HTTP 400 JSON response.

    Parameters
    ----------
    _req
        Falcon request (unused).
    resp
        Falcon response whose status and media are set.
    ex
        The classification error carrying the offending path.
    _params
        URI template parameters (unused).

    """
    resp.status = falcon.HTTP_400
    resp.media = {
        "title": "Feed not recognised",
        "description": str(ex),
        "field": "url",
    }


async def handle_unknown_dimension(
    _req: Request,
    resp: Response,
    ex: UnknownDimensionError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``UnknownDimensionError`` to an HTTP 404 JSON response."""
    resp.status = falcon.HTTP_404
    resp.media = {
        "title": "Filter dimension not found",
        "description": str(ex),
    }
