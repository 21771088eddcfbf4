"""Display adapters for presenting events.

Implementations:
- Stdout (terminal listing)
"""
