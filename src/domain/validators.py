"""Field validators for write payloads.

Each validator is a pure function taking the request payload as a mapping and
returning a ``ValidationResult``. Rules are checked per field in order and a
field keeps the message of the first rule it fails, so "required" wins over
length or format complaints about the same empty value.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import HttpUrl, TypeAdapter, ValidationError

from domain.entities.profile import SOCIAL_NETWORKS

_url_adapter: TypeAdapter[HttpUrl] = TypeAdapter(HttpUrl)

NAME_LENGTH = (2, 30)
PASSWORD_LENGTH = (6, 30)
HANDLE_LENGTH = (2, 40)
POST_TEXT_LENGTH = (10, 300)


@dataclass(frozen=True)
class ValidationResult:
    """Field -> message map; valid iff empty."""

    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class _Errors(dict[str, str]):
    def add(self, name: str, message: str) -> None:
        self.setdefault(name, message)


def is_empty(value: Any) -> bool:
    """None, blank strings and empty collections count as empty."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return not value
    return False


def parse_skills(value: str | list[str]) -> list[str]:
    """Split a comma-separated skills string into a clean ordered list."""
    items = value.split(",") if isinstance(value, str) else value
    return [item.strip() for item in items if item and item.strip()]


def is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_url(value: str) -> bool:
    """Accept absolute http(s) URLs and bare hosts such as ``example.com``."""
    candidate = value if "://" in value else f"http://{value}"
    try:
        url = _url_adapter.validate_python(candidate)
    except ValidationError:
        return False
    return bool(url.host) and "." in url.host


def _is_length(value: Any, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return low <= len(str(value)) <= high


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if is_empty(value) else str(value)


def validate_register_input(data: Mapping[str, Any]) -> ValidationResult:
    errors = _Errors()
    name = _text(data, "name")
    email = _text(data, "email")
    password = _text(data, "password")
    password2 = _text(data, "password2")

    if not name:
        errors.add("name", "Name field is required")
    if not _is_length(name, NAME_LENGTH):
        errors.add("name", "Name must be between 2 and 30 characters")

    if not email:
        errors.add("email", "Email field is required")
    if not is_email(email):
        errors.add("email", "Email is invalid")

    if not password:
        errors.add("password", "Password field is required")
    if not _is_length(password, PASSWORD_LENGTH):
        errors.add("password", "Password must be between 6 and 30 characters")

    if not password2:
        errors.add("password2", "Confirm password field is required")
    if password2 != password:
        errors.add("password2", "Passwords must match")

    return ValidationResult(errors=dict(errors))


def validate_login_input(data: Mapping[str, Any]) -> ValidationResult:
    errors = _Errors()
    email = _text(data, "email")
    password = _text(data, "password")

    if not email:
        errors.add("email", "Email field is required")
    if not is_email(email):
        errors.add("email", "Email is invalid")

    if not password:
        errors.add("password", "Password field is required")

    return ValidationResult(errors=dict(errors))


def validate_profile_input(data: Mapping[str, Any]) -> ValidationResult:
    errors = _Errors()
    handle = _text(data, "handle")

    if not handle:
        errors.add("handle", "Profile handle is required")
    if not _is_length(handle, HANDLE_LENGTH):
        errors.add("handle", "Handle needs to be between 2 and 40 characters")

    if is_empty(data.get("status")):
        errors.add("status", "Status field is required")

    skills = data.get("skills")
    if is_empty(skills) or not parse_skills(skills):
        errors.add("skills", "Skills field is required")

    # Optional links are only checked when supplied
    for key in ("website", *SOCIAL_NETWORKS):
        value = data.get(key)
        if not is_empty(value) and not is_url(str(value)):
            errors.add(key, "Not a valid URL")

    return ValidationResult(errors=dict(errors))


def validate_experience_input(data: Mapping[str, Any]) -> ValidationResult:
    errors = _Errors()

    if is_empty(data.get("title")):
        errors.add("title", "Job title field is required")
    if is_empty(data.get("company")):
        errors.add("company", "Company field is required")
    if is_empty(data.get("from_date")):
        errors.add("from_date", "From date field is required")

    return ValidationResult(errors=dict(errors))


def validate_education_input(data: Mapping[str, Any]) -> ValidationResult:
    errors = _Errors()

    if is_empty(data.get("school")):
        errors.add("school", "School field is required")
    if is_empty(data.get("degree")):
        errors.add("degree", "Degree field is required")
    if is_empty(data.get("field_of_study")):
        errors.add("field_of_study", "Field of study is required")
    if is_empty(data.get("from_date")):
        errors.add("from_date", "From date field is required")

    return ValidationResult(errors=dict(errors))


def validate_post_input(data: Mapping[str, Any]) -> ValidationResult:
    """Used for both posts and comments: only the text is checked."""
    errors = _Errors()
    text = _text(data, "text")

    if not text:
        errors.add("text", "Text field is required")
    if not _is_length(text, POST_TEXT_LENGTH):
        errors.add("text", "Post must be between 10 and 300 characters")

    return ValidationResult(errors=dict(errors))
