from pathlib import Path
from typing import Any, Dict, Union
from urllib.parse import quote

import httpx

from endpoints import ENDPOINTS, FILES
from .client import ShareClient
from .config import MAX_UPLOAD_BYTES
from .errors import AuthError, ConflictError, NotFoundError, UnknownServiceError
from .models import EndpointAccess, FileRecord
from .uploads import validate_upload_path
from .utils import truncate_text


def _error_message(resp: httpx.Response) -> str:
    try:
        payload = resp.json()
    except ValueError:
        return "Unknown error"
    if isinstance(payload, dict):
        msg = payload.get("error") or payload.get("message")
        if msg:
            return str(msg)
    return "Unknown error"


def _raise_for_status(
    resp: httpx.Response,
    unauthorized: str = "Invalid password",
    not_found: str = "Endpoint not found",
) -> None:
    if resp.is_success:
        return
    status = resp.status_code
    if status == 401:
        raise AuthError(unauthorized, status_code=status)
    if status == 404:
        raise NotFoundError(not_found, status_code=status)
    raise UnknownServiceError(_error_message(resp), status_code=status)


def _json_or_raise(resp: httpx.Response) -> Dict[str, Any]:
    _raise_for_status(resp)
    try:
        payload = resp.json()
    except ValueError as exc:
        raise UnknownServiceError(f"Non-JSON response: {truncate_text(resp.text, 200)}") from exc
    if not isinstance(payload, dict):
        raise UnknownServiceError(f"Unexpected response: {payload!r}")
    return payload


def _auth_token(payload: Dict[str, Any]) -> str:
    token = payload.get("auth_token")
    if not token:
        raise UnknownServiceError("Service response has no auth_token")
    return str(token)


def create_endpoint(client: ShareClient, name: str, password: str) -> str:
    route = ENDPOINTS["create"]
    resp = client.request(route["method"], route["path"], json={"site_name": name, "password": password})
    if resp.is_client_error:
        # The service answers 4xx when the name is taken or rejected.
        raise ConflictError(_error_message(resp), status_code=resp.status_code)
    return _auth_token(_json_or_raise(resp))


def access_endpoint(client: ShareClient, name: str, password: str) -> EndpointAccess:
    route = ENDPOINTS["access"]
    path = route["path"].format(name=quote(name, safe=""))
    payload = _json_or_raise(client.request(route["method"], path, params={"password": password}))
    files = [
        FileRecord.from_json(row)
        for row in payload.get("files") or []
        if isinstance(row, dict) and row.get("id") is not None
    ]
    return EndpointAccess(auth_token=_auth_token(payload), files=files)


def upload_file(
    client: ShareClient,
    endpoint_name: str,
    token: str,
    local_path: Union[str, Path],
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> None:
    path = validate_upload_path(str(local_path), max_bytes=max_bytes)
    route = FILES["upload"]
    url = route["path"].format(name=quote(endpoint_name, safe=""))
    with open(path, "rb") as handle:
        resp = client.request(
            route["method"],
            url,
            files={"file": (path.name, handle)},
            headers={"Authorization": token},
        )
    _raise_for_status(resp, unauthorized="Credential rejected; access the endpoint again")


def download_file(client: ShareClient, file_id: str, token: str) -> bytes:
    route = FILES["download"]
    path = route["path"].format(file_id=quote(str(file_id), safe=""))
    resp = client.request(route["method"], path, headers={"Authorization": token})
    if not resp.is_success:
        raise UnknownServiceError(_error_message(resp), status_code=resp.status_code)
    return resp.content
