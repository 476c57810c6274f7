class NotFoundError(LookupError):
    """Raised when a record id does not exist in its collection."""


class InvalidCredentialsError(ValueError):
    """Raised when email/password do not match the seeded account for a role."""
