"""Fake implementations of core ports for testing.

- FakeEventDisplayPort: Captured display calls for assertion
"""

from .display import FakeEventDisplayPort

__all__ = [
    "FakeEventDisplayPort",
]
