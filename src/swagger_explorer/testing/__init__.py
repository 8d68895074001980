"""Test utilities for explorer handlers::

    from swagger_explorer.testing import TestClient
"""

from swagger_explorer.testing.client import TestClient

__all__ = ["TestClient"]
