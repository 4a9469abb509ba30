"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a resource that is not theirs to act on."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to act on {resource} {resource_id}"
        )


class AlreadyPartneredError(DomainError):
    """Raised when an operation requires an unpartnered user."""

    def __init__(self, user_id: str, message: str | None = None):
        self.user_id = user_id
        super().__init__(message or f"User {user_id} already has a partner")


class NoPartnerError(DomainError):
    """Raised when unmatching a user who has no partner."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} does not have a partner")


class DuplicatePendingError(DomainError):
    """Raised when a pending request already exists between two users."""

    def __init__(self, sender_id: str, receiver_id: str):
        self.sender_id = sender_id
        self.receiver_id = receiver_id
        super().__init__(
            f"A pending request already exists between {sender_id} and {receiver_id}"
        )


class InvalidStateError(DomainError):
    """Raised when a transition is attempted from a non-pending state."""

    def __init__(self, resource: str, resource_id: str, status: str):
        self.resource = resource
        self.resource_id = resource_id
        self.status = status
        super().__init__(f"{resource} {resource_id} has already been {status}")


class EmailTakenError(DomainError):
    """Raised when an email address already belongs to a registered user."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class ConflictError(DomainError):
    """Raised when a concurrent write wins the race for a unique resource."""

    pass


class InvalidCredentialsError(DomainError):
    """Raised when login credentials do not match a user."""

    def __init__(self):
        super().__init__("Invalid email or password")


class InvalidResetTokenError(ValidationError):
    """Raised when a password reset token is unknown, used or expired."""

    def __init__(self):
        super().__init__("Invalid or expired reset token")
