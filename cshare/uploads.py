from pathlib import Path

from .config import MAX_UPLOAD_BYTES
from .errors import FileMissingError, FileTooLargeError, ValidationError
from .utils import format_bytes


def clean_path(raw: str) -> str:
    # Paths dropped onto a terminal arrive quoted.
    cleaned = (raw or "").strip().replace('"', "").replace("'", "")
    return str(Path(cleaned).expanduser()) if cleaned else ""


def validate_upload_path(raw: str, max_bytes: int = MAX_UPLOAD_BYTES) -> Path:
    """Check a local path before anything is sent to the service."""
    cleaned = clean_path(raw)
    if not cleaned:
        raise ValidationError("File path is required")
    path = Path(cleaned)
    if not path.is_file():
        raise FileMissingError("File does not exist")
    size = path.stat().st_size
    if size > max_bytes:
        raise FileTooLargeError(
            f"File size exceeds maximum limit of {format_bytes(max_bytes)} ({format_bytes(size)})"
        )
    return path
