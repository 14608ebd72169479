# gaudi/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Declaration Errors ---

class ParameterDeclarationError(DomainError):
    """Raised when a use case declares an invalid parameter list."""
    def __init__(self, owner: str, reason: str):
        super().__init__(f"Invalid parameters for '{owner}': {reason}")

# --- Registry Errors ---

class UseCaseNotFoundError(DomainError):
    """Raised when a use case name is not present in the registry."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Use case '{name}' is not registered.")

class UseCaseAlreadyRegisteredError(DomainError):
    """Raised when two use cases are registered under the same name."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Use case '{name}' is already registered.")

# --- Execution Errors ---

class UseCaseFailedError(DomainError):
    """
    Default error kind for use cases running in raise-on-failure mode.
    The message is the one of the failure Response that was not returned.
    """

# --- Repository Signals ---

class RepositoryError(DomainError):
    """Base class for conditions reported by a storage collaborator."""

class ResultNotFoundError(RepositoryError):
    """Raised when no stored entity matches the given fields."""
    def __init__(self, entity: str, fields: dict):
        super().__init__(f"No {entity} found matching {fields!r}")

class MultipleResultsFoundError(RepositoryError):
    """Raised when a single-entity lookup matches more than one entity."""
    def __init__(self, entity: str, fields: dict):
        super().__init__(f"Multiple {entity} entries found matching {fields!r}")

class DuplicateEntryError(RepositoryError):
    """Raised when creating an entity whose identity is already stored."""
    def __init__(self, entity: str, key: str):
        super().__init__(f"A {entity} with code '{key}' already exists")
