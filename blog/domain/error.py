"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed or out-of-range input."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error (e.g. an admin demoting themselves)."""

    pass


class AuthenticationError(DomainError):
    """Missing, invalid or expired credentials."""

    pass


class AuthorizationError(DomainError):
    """Raised when an authenticated actor is not allowed to act on a resource."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class ConflictError(DomainError):
    """Raised when an operation clashes with existing state."""

    pass


class DuplicateError(ConflictError):
    """Raised when a unique field is already taken."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidStateError(ConflictError):
    """Raised when a resource is not in a state that allows the operation."""

    pass


class InvalidStatusTransitionError(InvalidStateError):
    """Raised when a post status change breaks the forward-only lifecycle."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot change blog status from {current} to {target}")
