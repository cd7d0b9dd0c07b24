"""govfeed HTTP API layer.

This package provides the Falcon Asynchronous Server Gateway Interface
(ASGI) application serving health probes, feed descriptions and filter
option sets.

Usage
-----
Create the application::

    from govfeed.api import create_app

    app = create_app()              # health-only mode
    app = create_app(dependencies)  # with feed and filter endpoints

"""

from govfeed.api.app import create_app

__all__ = ["create_app"]
