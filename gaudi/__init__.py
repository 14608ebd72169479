# gaudi\__init__.py
"""
Gaudi - Use Case toolkit for Clean Architecture applications.

This package provides the application layer glue between the outside world
(CLI, HTTP, tests) and the business logic, following the Ports & Adapters
layout: validated Requests in, uniform Responses out.
"""

__version__ = "1.0.0"
