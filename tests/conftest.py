import io
import json

import httpx
import pytest
from rich.console import Console

from cshare.client import ShareClient
from cshare.config import Config
from cshare.presentation import Terminal
from cshare.session_store import CredentialStore

BASE_URL = "https://share.test"


class ScriptedTerminal(Terminal):
    """Answers prompts from a list and records what was shown."""

    def __init__(self, answers):
        super().__init__(Console(file=io.StringIO(), width=120, highlight=False))
        self.answers = list(answers)
        self.prompts = []
        self.pauses = []

    def _read(self, message, password=False, choices=None):
        self.prompts.append(message)
        if not self.answers:
            raise EOFError
        answer = self.answers.pop(0)
        if choices is not None:
            assert answer in choices, f"{answer!r} not in {choices} for {message!r}"
        return answer

    def pause(self, seconds):
        self.pauses.append(seconds)

    @property
    def output(self):
        return self.console.file.getvalue()


class FakeService:
    """Route table for httpx.MockTransport; records every request."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def on(self, method, path, handler):
        self.routes[(method, path)] = handler

    def reply(self, method, path, status=200, json_body=None, content=None):
        def handler(request):
            if content is not None:
                return httpx.Response(status, content=content)
            return httpx.Response(status, json=json_body)

        self.on(method, path, handler)

    def __call__(self, request):
        request.read()
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(500, json={"error": f"no route for {request.url.path}"})
        return handler(request)

    def paths(self):
        return [(r.method, r.url.path) for r in self.requests]

    @staticmethod
    def body(request):
        return json.loads(request.content)


@pytest.fixture
def service():
    return FakeService()


@pytest.fixture
def client(service):
    with ShareClient(base_url=BASE_URL, transport=httpx.MockTransport(service)) as share_client:
        yield share_client


@pytest.fixture
def config(tmp_path):
    download_dir = tmp_path / "downloads"
    download_dir.mkdir()
    return Config(
        base_url=BASE_URL,
        download_dir=download_dir,
        credential_path=tmp_path / ".env",
        error_delay=0,
        debug=False,
    )


@pytest.fixture
def store(config):
    return CredentialStore(config.credential_path)


@pytest.fixture
def scripted():
    return ScriptedTerminal
