import json

import pytest
import structlog

from healthhub_secrets import credentials
from healthhub_secrets.config import SecretsConfig
from healthhub_secrets.errors import SecretNotFound

ENV_VARS = (
    "AWS_REGION",
    "OPENAI_SECRET_NAME",
    "AZURE_SECRET_NAME",
    "GOOGLE_SECRET_NAME",
    "STAGE",
    "LOG_LEVEL",
    "OPEN_AI_KEY",
    "ASSISTANT_ID",
    "AZURE_SPEECH_KEY",
    "AZURE_SPEECH_REGION",
    "GOOGLE_PROJECT_ID",
    "GOOGLE_PRIVATE_KEY",
    "GOOGLE_CLIENT_EMAIL",
    "AWS_REQUEST_ID",
    "_X_AMZN_TRACE_ID",
)


class FakeStore:
    """In-memory secret store that counts fetches and can be told to fail."""

    def __init__(self, secrets: dict[str, object] | None = None) -> None:
        self.payloads: dict[str, str | None] = {}
        self.errors: dict[str, Exception] = {}
        self.calls: list[str] = []
        for name, value in (secrets or {}).items():
            self.put(name, value)

    def put(self, name: str, value: object) -> None:
        self.payloads[name] = value if value is None or isinstance(value, str) else json.dumps(value)

    def fail(self, name: str, error: Exception) -> None:
        self.errors[name] = error

    def recover(self, name: str) -> None:
        self.errors.pop(name, None)

    def fetch(self, identifier: str) -> str | None:
        self.calls.append(identifier)
        if identifier in self.errors:
            raise self.errors[identifier]
        if identifier not in self.payloads:
            raise SecretNotFound(identifier)
        return self.payloads[identifier]


class FakeClock:
    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    credentials.set_default_cache(None)
    yield
    credentials.set_default_cache(None)
    structlog.reset_defaults()


@pytest.fixture()
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def config() -> SecretsConfig:
    return SecretsConfig()
