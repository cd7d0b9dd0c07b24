"""Service configuration read from the environment.

Usage
-----
>>> config = ServiceConfig()
>>> config.locale
'en'

Or load from environment variables:

>>> import os
>>> os.environ["GOVFEED_LOCALE"] = "cy"
>>> ServiceConfig.from_env().locale
'cy'

"""

from __future__ import annotations

import dataclasses as dc
import os
from pathlib import Path

from govfeed.filters.options import DEFAULT_LOCALE
from govfeed.filters.routes import DEFAULT_PATH_PREFIX, PATH_PREFIX_PATTERN

_MIN_PORT = 1
_MAX_PORT = 65535


@dc.dataclass(frozen=True, slots=True)
class ServiceConfig:
    """Configuration for the govfeed HTTP service.

    Attributes
    ----------
    host
        Bind address for the ASGI server.
    port
        Listen port, 1-65535.
    log_level
        Raw log level; normalised by :func:`govfeed.logging.configure_logging`.
    taxonomy_path
        Taxonomy YAML file. Without one the service only answers health
        probes.
    locale
        Locale for filter labels and organisation names.
    feed_path_prefix
        Path prefix of the global feeds, ``/government`` by default.

    """

    host: str = "0.0.0.0"  # noqa: S104 - bind all interfaces for container
    port: int = 8080
    log_level: str = "INFO"
    taxonomy_path: Path | None = None
    locale: str = DEFAULT_LOCALE
    feed_path_prefix: str = DEFAULT_PATH_PREFIX

    @staticmethod
    def _parse_port(raw: str) -> int:
        try:
            port = int(raw)
        except ValueError as exc:
            msg = f"GOVFEED_PORT must be an integer, got: {raw!r}"
            raise ValueError(msg) from exc
        if not _MIN_PORT <= port <= _MAX_PORT:
            msg = (
                f"GOVFEED_PORT must be between {_MIN_PORT} and {_MAX_PORT}, "
                f"got: {port}"
            )
            raise ValueError(msg)
        return port

    @staticmethod
    def _optional_str(env_var: str, default: str) -> str:
        raw = os.environ.get(env_var, "")
        return raw.strip() or default

    @classmethod
    def from_env(cls) -> ServiceConfig:
        """Create configuration from environment variables.

        Reads ``GOVFEED_HOST``, ``GOVFEED_PORT``, ``GOVFEED_LOG_LEVEL``,
        ``GOVFEED_TAXONOMY_PATH``, ``GOVFEED_LOCALE`` and
        ``GOVFEED_FEED_PATH_PREFIX``. Unset or blank variables take the
        defaults.

        Raises
        ------
        ValueError
            If ``GOVFEED_PORT`` is not an integer in range, or
            ``GOVFEED_FEED_PATH_PREFIX`` is not a single absolute path segment.

        """
        defaults = cls()

        raw_port = os.environ.get("GOVFEED_PORT", "")
        port = cls._parse_port(raw_port) if raw_port.strip() else defaults.port

        raw_taxonomy = os.environ.get("GOVFEED_TAXONOMY_PATH", "")
        taxonomy_path = Path(raw_taxonomy.strip()) if raw_taxonomy.strip() else None

        prefix = cls._optional_str(
            "GOVFEED_FEED_PATH_PREFIX", defaults.feed_path_prefix
        )
        if not prefix.startswith("/"):
            msg = f"GOVFEED_FEED_PATH_PREFIX must start with '/', got: {prefix!r}"
            raise ValueError(msg)
        if PATH_PREFIX_PATTERN.match(prefix) is None:
            msg = (
                "GOVFEED_FEED_PATH_PREFIX must be a single path segment such as "
                f"'/government', got: {prefix!r}"
            )
            raise ValueError(msg)

        return cls(
            host=cls._optional_str("GOVFEED_HOST", defaults.host),
            port=port,
            log_level=cls._optional_str("GOVFEED_LOG_LEVEL", defaults.log_level),
            taxonomy_path=taxonomy_path,
            locale=cls._optional_str("GOVFEED_LOCALE", defaults.locale),
            feed_path_prefix=prefix,
        )
