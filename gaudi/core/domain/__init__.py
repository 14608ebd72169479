# gaudi\core\domain\__init__.py
"""
Domain Entities and Value Objects.

This package defines the data structures flowing through a use case:
parameter declarations, Requests, Responses and the example Room entity.
They are devoid of any infrastructure logic.
"""
