"""Planner: in-memory event management core.

Tracks events together with the participants and logistics items that
belong to them. The core package has no third-party dependencies; the
adapters package holds display implementations and the composition root
lives in planner.main.
"""

__version__ = "0.1.0"
