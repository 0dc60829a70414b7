import pytest


class FakeProvider:
    name = "fake"

    def __init__(self, response_text: str):
        self._response_text = response_text
        self.calls = []

    def generate(self, *, system, user: str, max_tokens: int) -> str:
        self.calls.append({"system": system, "user": user, "max_tokens": max_tokens})
        return self._response_text


class FailingProvider:
    name = "fake"

    def __init__(self, error: Exception):
        self._error = error

    def generate(self, *, system, user: str, max_tokens: int) -> str:
        raise self._error


@pytest.fixture
def fake_provider_factory():
    def _make(response_text: str):
        return FakeProvider(response_text)
    return _make


@pytest.fixture
def failing_provider_factory():
    def _make(error: Exception):
        return FailingProvider(error)
    return _make


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("API_CONFIG_PATH", str(tmp_path / "api-config.json"))
