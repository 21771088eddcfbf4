"""External adapters for the Planner event core.

Adapter Organization:

- display/: Adapters that present events to a user (stdout, etc.)
"""
