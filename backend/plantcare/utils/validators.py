"""Field-level checks shared by the request schemas.

Each ``check_*`` function returns the cleaned value or raises ``ValueError``,
which Pydantic reports as a field error.
"""
import re
import unicodedata
from typing import Optional
from urllib.parse import urlparse

MAX_NAME_LENGTH = 100
MAX_TEXT_LENGTH = 500

# Latin letters plus the Latin-1 accented range, and whitespace.
LETTERS_PATTERN = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ\s]+$")
ALPHANUMERIC_PATTERN = re.compile(r"^[A-Za-z0-9À-ÖØ-öø-ÿ\s]+$")
IMAGE_DATA_URI_PATTERN = re.compile(r"^data:image/[a-z0-9.+-]+;base64,", re.IGNORECASE)


def clean_text(value: Optional[str]) -> Optional[str]:
    """Trim incoming string data and return None for None values."""
    if value is None:
        return None
    return value.strip()


def normalize_name(value: str) -> str:
    """Strip diacritics, collapse whitespace and case-fold for fuzzy matching."""
    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(stripped.split()).casefold()


def check_required_text(value: Optional[str], field: str, max_length: int = MAX_TEXT_LENGTH) -> str:
    cleaned = clean_text(value)
    if not cleaned:
        raise ValueError(f"{field} must not be empty")
    if len(cleaned) > max_length:
        raise ValueError(f"{field} must be at most {max_length} characters")
    return cleaned


def check_letters_name(value: Optional[str], field: str) -> str:
    """Letters, diacritics and spaces only (no digits or symbols)."""
    cleaned = check_required_text(value, field, MAX_NAME_LENGTH)
    if not LETTERS_PATTERN.match(cleaned):
        raise ValueError(f"{field} may only contain letters and spaces")
    return cleaned


def check_alphanumeric_name(value: Optional[str], field: str) -> str:
    cleaned = check_required_text(value, field, MAX_NAME_LENGTH)
    if not ALPHANUMERIC_PATTERN.match(cleaned):
        raise ValueError(f"{field} may only contain letters, digits and spaces")
    return cleaned


def is_image_data_uri(value: str) -> bool:
    return bool(IMAGE_DATA_URI_PATTERN.match(value.strip()))


def is_http_url(value: str) -> bool:
    parsed = urlparse(value.strip())
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def is_empty_image(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def check_image_data_uri(value: Optional[str]) -> Optional[str]:
    if is_empty_image(value):
        return None
    if not is_image_data_uri(value):
        raise ValueError("photo must be a base64 image data URI (data:image/...;base64,)")
    return value.strip()


def check_image(value: Optional[str]) -> Optional[str]:
    """Accept an image data URI or an http(s) URL; blank means no photo."""
    if is_empty_image(value):
        return None
    if not (is_image_data_uri(value) or is_http_url(value)):
        raise ValueError("photo must be an image data URI or a valid http(s) URL")
    return value.strip()
