"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- materials: Reading material catalog

==============================================================================
"""

from . import health, materials

__all__ = ["health", "materials"]
