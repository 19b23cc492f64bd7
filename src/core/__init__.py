"""
Core package for tumaps.

Configuration, the hosted auth abstraction, session records, trip access,
map and dashboard view models, and HTTP glue live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
