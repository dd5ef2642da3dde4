import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from endpoints import BASE_URL

DOWNLOAD_DIR_NAME = "cfileshare"
MAX_UPLOAD_BYTES = 5 * 1024 * 1024


def _debug_enabled() -> bool:
    return os.getenv("CSHARE_DEBUG", "0") in ("1", "true", "TRUE")


def _default_download_dir() -> Path:
    return Path.home() / "Downloads" / DOWNLOAD_DIR_NAME


@dataclass
class Config:
    base_url: str = BASE_URL
    download_dir: Path = field(default_factory=_default_download_dir)
    credential_path: Path = Path(".env")
    max_upload_bytes: int = MAX_UPLOAD_BYTES
    error_delay: float = 2.0  # seconds, long enough to read the error
    timeout: float = 30.0
    debug: bool = field(default_factory=_debug_enabled)
    http_log_path: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.debug and self.http_log_path is None:
            self.http_log_path = Path(os.getcwd()) / "cshare_http.log"
