"""Test utilities for capsula applications.

    from capsula.testing import TestClient
"""

from capsula.testing.client import TestClient

__all__ = ["TestClient"]
