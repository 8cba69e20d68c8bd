class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(AppError):
    """Raised when a required argument is missing."""

    def __init__(self, argument: str = "argument"):
        super().__init__(f"{argument} must not be None")


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str = "Resource", id: str = ""):
        super().__init__(f"{resource} not found: {id}" if id else f"{resource} not found")
