"""Mini README: Map lifecycle package.

The ``service`` module contains ``MapService``, the public entry point for
creating and deleting maps.
"""

from .service import CREATE_ACTION, DELETE_ACTION, MapService

__all__ = ["CREATE_ACTION", "DELETE_ACTION", "MapService"]
