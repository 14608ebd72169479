# gaudi\shared\__init__.py
"""
Shared utilities package.

This module contains cross-cutting concerns used by both the Core layer
and Infrastructure Adapters, including:
- Configuration management
- Structured logging
- Distributed tracing (Observability)
- Dependency Injection wiring
"""
