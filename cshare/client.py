from typing import Any, Optional
import json

import httpx

from endpoints import BASE_URL
from .errors import NetworkError
from .utils import append_log_line, get_logger, redact_payload, redacted_headers, truncate_text


class ShareClient:
    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
        http_log_path: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
        debug: bool = False,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.logger = get_logger('cshare.http', debug=debug)
        self._client = httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=transport)
        self.http_log_path = str(http_log_path) if http_log_path else None

    def __enter__(self) -> "ShareClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _log_line(self, line: str) -> None:
        if self.http_log_path:
            append_log_line(self.http_log_path, line)

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send one request and return the response whatever its status.

        Only a missing response is an error here; status codes are mapped by
        the callers in ``api``.
        """
        url = path if path.startswith('http') else f"{self.base_url}{path}"
        headers = dict(kwargs.get('headers', {}) or {})
        kwargs['headers'] = headers
        redacted = redacted_headers(headers)
        payload = None
        if "json" in kwargs:
            payload = redact_payload(kwargs.get("json"))
        elif "params" in kwargs:
            payload = redact_payload(kwargs.get("params"))
        self.logger.debug('HTTP %s %s headers=%s', method, url, redacted)
        if payload is not None:
            self._log_line(f"{method} {url} headers={redacted} payload={payload}")
        else:
            self._log_line(f"{method} {url} headers={redacted}")
        try:
            resp = self._client.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            self.logger.debug('HTTP %s %s failed: %s', method, url, exc)
            self._log_line(f"{method} {url} error={exc!r}")
            raise NetworkError('Server not responding. Is the server running?') from exc
        self.logger.debug('HTTP %s %s status=%s', method, url, resp.status_code)
        if self.http_log_path:
            response_body: Any = None
            try:
                response_body = redact_payload(resp.json())
            except ValueError:
                response_body = truncate_text(resp.text or "", limit=200)
            self._log_line(
                f"{method} {url} status={resp.status_code} response={json.dumps(response_body, ensure_ascii=True)}"
            )
        return resp

    def close(self) -> None:
        self._client.close()
