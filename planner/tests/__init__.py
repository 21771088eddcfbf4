"""Test suite for the Planner event core.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations

3. fakes/: Port implementations for testing
"""
