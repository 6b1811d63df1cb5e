"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Ownership errors (401, kept distinct from not-found)
    NOT_AUTHORIZED = "NOT_AUTHORIZED"

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    EXPERIENCE_NOT_FOUND = "EXPERIENCE_NOT_FOUND"
    EDUCATION_NOT_FOUND = "EDUCATION_NOT_FOUND"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMAIL_EXISTS = "EMAIL_EXISTS"
    HANDLE_EXISTS = "HANDLE_EXISTS"
    PASSWORD_INCORRECT = "PASSWORD_INCORRECT"
    ALREADY_LIKED = "ALREADY_LIKED"
    NOT_LIKED = "NOT_LIKED"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class NotAuthorizedError(AppException):
    """Caller does not own the resource they tried to modify."""

    def __init__(self, message: str = "User not authorized") -> None:
        super().__init__(
            error_code=ErrorCode.NOT_AUTHORIZED,
            message=message,
            status_code=401,
            details={"not_authorized": message},
        )


class ValidationFailedError(AppException):
    """Request payload failed field validation.

    ``details`` carries the field -> message map produced by the validator.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Request validation failed",
            status_code=400,
            details=dict(errors),
        )


class EmailExistsError(AppException):
    """A user with this email is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMAIL_EXISTS,
            message=f"Email already exists: {email}",
            status_code=400,
            details={"email": "Email already exists"},
        )


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
            status_code=404,
            details={"email": "User not found"},
        )


class PasswordIncorrectError(AppException):
    """Supplied password does not match the stored hash."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.PASSWORD_INCORRECT,
            message="Password incorrect",
            status_code=400,
            details={"password": "Password incorrect"},
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, message: str = "There is no profile for this user") -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=message,
            status_code=404,
            details={"no_profile": message},
        )


class HandleExistsError(AppException):
    """Profile handle is already taken."""

    def __init__(self, handle: str) -> None:
        super().__init__(
            error_code=ErrorCode.HANDLE_EXISTS,
            message=f"Handle already exists: {handle}",
            status_code=400,
            details={"handle": "That handle already exists"},
        )


class ExperienceNotFoundError(AppException):
    """Experience entry not found on the caller's profile."""

    def __init__(self, exp_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.EXPERIENCE_NOT_FOUND,
            message=f"Experience not found: {exp_id}",
            status_code=404,
            details={"exp_id": exp_id},
        )


class EducationNotFoundError(AppException):
    """Education entry not found on the caller's profile."""

    def __init__(self, edu_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.EDUCATION_NOT_FOUND,
            message=f"Education not found: {edu_id}",
            status_code=404,
            details={"edu_id": edu_id},
        )


class PostNotFoundError(AppException):
    """Post not found."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_NOT_FOUND,
            message=f"Post not found: {post_id}",
            status_code=404,
            details={"no_post": "No post found with that ID"},
        )


class CommentNotFoundError(AppException):
    """Comment not found on the post."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.COMMENT_NOT_FOUND,
            message=f"Comment not found: {comment_id}",
            status_code=404,
            details={"comment_not_exists": "Comment does not exist"},
        )


class AlreadyLikedError(AppException):
    """The caller has already liked the post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ALREADY_LIKED,
            message=f"User already liked post {post_id}",
            status_code=400,
            details={"already_liked": "User already liked this post"},
        )


class NotLikedError(AppException):
    """The caller has not liked the post yet."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_LIKED,
            message=f"User has not liked post {post_id}",
            status_code=400,
            details={"not_liked": "You have not yet liked this post"},
        )
