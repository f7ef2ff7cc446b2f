"""
Application error taxonomy.

Every error raised from a request path derives from AppError and is turned
into the same JSON envelope by the handlers registered in app.main.
"""


class AppError(Exception):
    status_code = 500
    public_message = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def client_message(self) -> str:
        return self.public_message or self.message


class ValidationError(AppError):
    """Bad or missing request parameter."""
    status_code = 400


class AuthError(AppError):
    """Missing, malformed, badly signed or expired bearer token."""
    status_code = 401


class BackendError(AppError):
    """
    Search backend call or response decoding failed.

    The message carries the underlying cause for the log; clients only
    receive `public_message`.
    """
    status_code = 500

    def __init__(self, message: str, public_message: str = "Internal server error"):
        super().__init__(message)
        self.public_message = public_message


class LoadError(AppError):
    """The source file could not be read or the bulk write was rejected."""


class StartupError(AppError):
    """Provisioning failed; the process must not start serving."""
