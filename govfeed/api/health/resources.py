"""Liveness and readiness probe resources.

Usage
-----
::

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource(taxonomy_loaded=True))

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["HealthResource", "ReadyResource"]


class HealthResource:
    """Liveness probe returning ``{"status": "ok"}``."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /health requests."""
        resp.media = {"status": "ok"}
        resp.status = HTTPStatus.OK


class ReadyResource:
    """Readiness probe reporting whether a taxonomy is loaded.

    The service can always answer probes, so it reports ready either way;
    ``taxonomy`` tells operators whether feed endpoints are mounted.
    """

    def __init__(self, *, taxonomy_loaded: bool = False) -> None:
        """Record whether the feed endpoints are available."""
        self._taxonomy_loaded = taxonomy_loaded

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /ready requests.

        Parameters
        ----------
        _req
            Falcon request (unused).
        resp
            Falcon response populated with readiness status.

        """
        resp.media = {
            "status": "ready",
            "taxonomy": "loaded" if self._taxonomy_loaded else "absent",
        }
        resp.status = HTTPStatus.OK
