# gaudi\core\__init__.py
"""
Core Layer.

This package contains the use case protocol and the business entities.
It strictly follows the Hexagonal Architecture (Ports & Adapters) pattern:
- No dependencies on frameworks or transport layers.
- No dependencies on storage technology (SQL, memory, files).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
