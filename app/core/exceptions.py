from typing import Optional, Any

class EcomAdminError(Exception):
    """
    Base exception for the admin API.
    """
    def __init__(self, message: str, code: str = "SERVER_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class BadRequestError(EcomAdminError):
    """
    Base for client errors reported as a generic 400 BAD_REQUEST.
    """
    def __init__(self, message: str = "Bad request", details: Optional[Any] = None):
        super().__init__(message, code="BAD_REQUEST", status_code=400, details=details)

class MissingParametersError(BadRequestError):
    """
    Raised when a required request field is absent or empty.
    """
    def __init__(self, message: str = "Insufficient parameters", details: Optional[Any] = None):
        super().__init__(message, details=details)

class DuplicateEntityError(BadRequestError):
    """
    Raised when a unique field (username, email) is already taken.
    """
    def __init__(self, message: str = "Data duplication found", details: Optional[Any] = None):
        super().__init__(message, details=details)

class InvalidCredentialsError(BadRequestError):
    """
    Raised when login fails, whether the username is unknown or the password is wrong.
    """
    def __init__(self, message: str = "Incorrect username or password", details: Optional[Any] = None):
        super().__init__(message, details=details)

class AccountLockedError(BadRequestError):
    """
    Raised when an account is locked out after too many failed logins.
    """
    def __init__(self, message: str = "Login retry limit exceeded", details: Optional[Any] = None):
        super().__init__(message, details=details)

class InvalidOTPError(BadRequestError):
    def __init__(self, message: str = "Invalid OTP", details: Optional[Any] = None):
        super().__init__(message, details=details)

class InvalidCodeError(BadRequestError):
    def __init__(self, message: str = "Your reset password link is expired or invalid", details: Optional[Any] = None):
        super().__init__(message, details=details)

class InvalidPasswordError(BadRequestError):
    def __init__(self, message: str = "Password is not acceptable", details: Optional[Any] = None):
        super().__init__(message, details=details)

class ResourceNotFoundError(EcomAdminError):
    """
    Raised when a requested resource is not found.
    """
    def __init__(self, message: str = "Record not found", details: Optional[Any] = None):
        super().__init__(message, code="RECORD_NOT_FOUND", status_code=404, details=details)

class AuthenticationError(EcomAdminError):
    """
    Raised when a protected route is called without a usable bearer token.
    """
    def __init__(self, message: str = "Unauthorized", details: Optional[Any] = None):
        super().__init__(message, code="UNAUTHORIZED", status_code=401, details=details)

class InvalidTokenError(AuthenticationError):
    def __init__(self, message: str = "Invalid token", details: Optional[Any] = None):
        super().__init__(message, details=details)

class ExpiredTokenError(AuthenticationError):
    def __init__(self, message: str = "Token has expired", details: Optional[Any] = None):
        super().__init__(message, details=details)

class ValidationError(EcomAdminError):
    """
    Raised when input validation fails.
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=422, details=details)
