"""govfeed runtime entrypoint.

``create_app`` is the Granian ASGI factory (``govfeed.runtime:create_app``).
It reads :class:`~govfeed.config.ServiceConfig` from the environment and,
when ``GOVFEED_TAXONOMY_PATH`` is set, loads the taxonomy so the feed and
filter endpoints are mounted. Otherwise only the health probes are served.

Run the service directly with ``python -m govfeed.runtime``.
"""

from __future__ import annotations

import typing as typ

from govfeed.config import ServiceConfig
from govfeed.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)

if typ.TYPE_CHECKING:
    import falcon.asgi

__all__ = ["create_app", "load_config", "main"]

logger = get_logger(__name__)


def load_config() -> ServiceConfig:
    """Read the service configuration, exiting on invalid values.

    Raises
    ------
    SystemExit
        If the environment holds an invalid setting.

    """
    try:
        return ServiceConfig.from_env()
    except ValueError as exc:
        log_error(logger, "Invalid govfeed configuration: %s", exc)
        raise SystemExit(1) from exc


def create_app() -> falcon.asgi.App:
    """Create the Falcon ASGI application from environment configuration.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    from govfeed.api.app import AppDependencies
    from govfeed.api.app import create_app as _create_api_app

    config = load_config()
    if config.taxonomy_path is None:
        log_warning(
            logger, "GOVFEED_TAXONOMY_PATH is not set; serving health probes only"
        )
        return _create_api_app()

    from govfeed.taxonomy import TaxonomyIndex

    index = TaxonomyIndex.from_path(config.taxonomy_path)
    log_info(
        logger,
        "Loaded taxonomy from %s (%d organisations, %d topics)",
        config.taxonomy_path,
        len(index.organisations()),
        len(index.topics()),
    )
    return _create_api_app(
        AppDependencies(
            index=index,
            locale=config.locale,
            feed_path_prefix=config.feed_path_prefix,
        )
    )


def main() -> None:
    """Start the govfeed service using Granian."""
    from granian import Granian
    from granian.constants import Interfaces

    config = load_config()

    normalized_level, invalid_level = configure_logging(config.log_level)
    if invalid_level:
        log_warning(
            logger,
            "Invalid GOVFEED_LOG_LEVEL %r, falling back to %s",
            config.log_level,
            normalized_level,
        )

    log_info(
        logger,
        "Starting govfeed on %s:%d (log_level=%s)",
        config.host,
        config.port,
        normalized_level,
    )

    server = Granian(
        "govfeed.runtime:create_app",
        address=config.host,
        port=config.port,
        interface=Interfaces.ASGI,
        factory=True,
    )
    server.serve()


if __name__ == "__main__":
    main()
