"""Health probe resources.

Usage
-----
Import health resources for route registration::

    from govfeed.api.health.resources import HealthResource, ReadyResource
"""
