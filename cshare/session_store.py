import os
from pathlib import Path
from typing import Dict, Union

from .errors import MissingCredentialError

DEFAULT_CREDENTIAL_PATH = ".env"
TOKEN_KEY = "auth_token"


def _parse_env(text: str) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        values[key.strip()] = value
    return values


class CredentialStore:
    """Keeps the single auth token of the last created or accessed endpoint.

    The file holds one ``auth_token=<token>`` line and is rewritten in full on
    every save, so the last writer wins.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_CREDENTIAL_PATH):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(f"{TOKEN_KEY}={token}\n", encoding="utf-8")
        os.chmod(self.path, 0o600)

    def load(self) -> str:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise MissingCredentialError(
                f"No saved credential at {self.path}; access the endpoint again"
            ) from exc
        token = _parse_env(text).get(TOKEN_KEY)
        if not token:
            raise MissingCredentialError(f"Credential file {self.path} has no {TOKEN_KEY}")
        return token
