from typing import Optional, Union
from urllib.parse import urlsplit

from constants import (
    BLANK_MESSAGE,
    INVALID_CATEGORY_MESSAGE,
    INVALID_URL_MESSAGE,
    LENGTH_EXCEEDED_MESSAGE,
    WHITESPACE_RE,
)
from recipe_models import (
    AuthorRecord,
    FailureKind,
    FieldRecord,
    LimitPolicy,
    RecipeCategory,
    ValidationFailure,
)

HTTP_SCHEMES = ("http", "https")


def is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def is_http_url(url: Optional[str]) -> bool:
    """True when url is an absolute http or https url with a host."""
    if is_blank(url) or WHITESPACE_RE.search(url):
        return False
    try:
        parts = urlsplit(url)
        # Accessing port validates it.
        parts.port
    except ValueError:
        return False
    return parts.scheme.lower() in HTTP_SCHEMES and bool(parts.hostname)


def too_long(subject: str, limit: int, kind: FailureKind = FailureKind.FIELD_TOO_LONG) -> ValidationFailure:
    return ValidationFailure(
        kind=kind,
        message=LENGTH_EXCEEDED_MESSAGE.format(subject=subject, limit=limit),
        subject=subject,
        limit=limit,
    )


def blank(subject: str) -> ValidationFailure:
    return ValidationFailure(
        kind=FailureKind.INVALID_FIELD,
        message=BLANK_MESSAGE.format(subject=subject),
        subject=subject,
    )


def invalid_url(subject: str) -> ValidationFailure:
    return ValidationFailure(
        kind=FailureKind.INVALID_URL,
        message=INVALID_URL_MESSAGE.format(subject=subject),
        subject=subject,
    )


def _require_policy(policy: LimitPolicy) -> None:
    if not isinstance(policy, LimitPolicy):
        raise TypeError("policy must be a LimitPolicy")


def validate_field(name: str, data: str, policy: LimitPolicy) -> Union[FieldRecord, ValidationFailure]:
    """Validate a recipe field; the first violation found is returned.

    Blank name or data gives InvalidField, an oversized name or data gives
    FieldTooLong carrying the exceeded limit.
    """
    _require_policy(policy)

    if is_blank(name):
        return blank("Field name")
    if is_blank(data):
        return blank(f"{name} field")
    if len(name) > policy.max_field_name:
        return too_long("Field name", policy.max_field_name)
    if len(data) > policy.max_field_data:
        return too_long(f"{name} field", policy.max_field_data)

    return FieldRecord(name=name, data=data)


def validate_author(name: str, image_url: str, policy: LimitPolicy) -> Union[AuthorRecord, ValidationFailure]:
    _require_policy(policy)

    if is_blank(name):
        return blank("Author name")
    trimmed = name.strip()
    if len(trimmed) > policy.max_author_name:
        return too_long("Author name", policy.max_author_name)
    if not is_http_url(image_url):
        return invalid_url("Author image url")

    return AuthorRecord(name=trimmed, image_url=image_url)


def parse_category(value: Union[RecipeCategory, str, None]) -> Union[RecipeCategory, ValidationFailure]:
    """Resolve a category from the enum itself, its value, name or display label."""
    if isinstance(value, RecipeCategory):
        return value

    if isinstance(value, str):
        wanted = value.strip().lower()
        for category in RecipeCategory:
            if wanted in (category.value, category.name.lower(), category.label.lower()):
                return category

    choices = ", ".join(category.label for category in RecipeCategory)
    return ValidationFailure(
        kind=FailureKind.INVALID_CATEGORY,
        message=INVALID_CATEGORY_MESSAGE.format(value=value, choices=choices),
        subject="Category",
    )
