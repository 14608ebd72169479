# gaudi\adapters\__init__.py
"""
Infrastructure Adapters.

This package contains the concrete implementations of the Ports defined in `gaudi.core.ports`.
These adapters connect the use cases to the outside world:
- `persistence`: Secondary Adapters (Driven) - Room storage in memory or in SQL.

In Hexagonal Architecture, dependencies point INWARD. These modules depend on `gaudi.core`,
but `gaudi.core` never imports from here.
"""
