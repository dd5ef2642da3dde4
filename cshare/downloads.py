from pathlib import Path
from typing import Union


def ensure_download_dir(path: Union[str, Path]) -> Path:
    download_dir = Path(path)
    download_dir.mkdir(parents=True, exist_ok=True)
    return download_dir


def save_download(download_dir: Union[str, Path], file_name: str, content: bytes) -> Path:
    # Only the last component is used so a listing cannot escape the directory.
    name = Path(file_name.replace("\\", "/")).name
    if not name or name in (".", ".."):
        raise ValueError(f"Unusable file name: {file_name!r}")
    target = Path(download_dir) / name
    target.write_bytes(content)
    return target
