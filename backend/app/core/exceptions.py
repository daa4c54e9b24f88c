"""Custom exception classes for the idea tracker application."""


class IdeaTrackerException(Exception):
    """Base exception for all idea tracker errors."""

    def __init__(self, message: str, details: str | None = None, field: str | None = None):
        self.message = message
        self.details = details
        self.field = field
        super().__init__(self.message)


class ValidationFailedError(IdeaTrackerException):
    """Raised when input is missing or malformed."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message=message, field=field)


class ResourceNotFoundError(IdeaTrackerException):
    """Raised when a referenced resource does not exist."""


class IdeaNotFoundError(ResourceNotFoundError):
    """Raised when an idea is not found."""

    def __init__(self, idea_id: int):
        super().__init__(
            message="Idea not found",
            details=f"No idea with id {idea_id}"
        )
        self.idea_id = idea_id


class ConflictError(IdeaTrackerException):
    """Raised when a write would violate a uniqueness rule."""


class UsernameTakenError(ConflictError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str):
        super().__init__(message="Username already taken", field="username")
        self.username = username


class DuplicateUpvoteError(ConflictError):
    """Raised when a user upvotes an idea they have already upvoted."""

    def __init__(self, idea_id: int, user_id: int):
        super().__init__(message="Already upvoted")
        self.idea_id = idea_id
        self.user_id = user_id


class UnauthorizedError(IdeaTrackerException):
    """Raised when a guarded operation is attempted without a session."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message=message)


class InvalidCredentialsError(UnauthorizedError):
    """Raised when a username/password pair does not match."""

    def __init__(self):
        super().__init__(message="Invalid username or password")


class ForbiddenError(IdeaTrackerException):
    """Raised when an authenticated user may not mutate a resource."""

    def __init__(self, message: str = "You do not have permission to modify this resource"):
        super().__init__(message=message)
