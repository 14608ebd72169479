# tests\__init__.py
"""
Test Suite for Gaudi.

Organization:
- `core`: Requests, Responses, Use Cases and the registry, with mocked repositories.
- `adapters`: Repository implementations (in memory, SQLite through SQLAlchemy).
- `shared`: Configuration, logging and the DI container.
"""
