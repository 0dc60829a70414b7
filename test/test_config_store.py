import json

from keyprompt.models import ApiConfig
from storage.config_store import ApiConfigStore


def test_defaults_when_missing(tmp_path):
    store = ApiConfigStore(path=str(tmp_path / "missing.json"))
    config = store.load()
    assert config.selected_provider == "gemini"
    assert not config.is_configured()


def test_roundtrip_uses_camel_case_keys(tmp_path):
    path = tmp_path / "api-config.json"
    store = ApiConfigStore(path=str(path))
    store.save(ApiConfig(selectedProvider="openrouter", openRouterApiKey="k", openRouterModel="m"))

    saved = json.loads(path.read_text())
    assert saved["selectedProvider"] == "openrouter"
    assert saved["openRouterModel"] == "m"

    loaded = store.load()
    assert loaded.openrouter_api_key == "k"
    assert loaded.is_configured()


def test_corrupted_file_falls_back_to_defaults(tmp_path):
    p = tmp_path / "api-config.json"
    p.write_text("{not valid json")
    store = ApiConfigStore(path=str(p))
    assert store.load() == ApiConfig()


def test_update_merges_and_saves(tmp_path):
    store = ApiConfigStore(path=str(tmp_path / "api-config.json"))
    current = ApiConfig(geminiApiKey="g")
    updated = store.update(current, {"selectedProvider": "openrouter", "openRouterApiKey": "k"})

    assert updated.gemini_api_key == "g"
    assert updated.selected_provider == "openrouter"
    assert not updated.is_configured()
    assert store.load() == updated


def test_env_path(tmp_path, monkeypatch):
    monkeypatch.setenv("API_CONFIG_PATH", str(tmp_path / "custom.json"))
    assert ApiConfigStore().path == tmp_path / "custom.json"


def test_is_configured_rules():
    assert ApiConfig(selectedProvider="gemini", geminiApiKey="g").is_configured()
    assert not ApiConfig(selectedProvider="gemini", openRouterApiKey="k", openRouterModel="m").is_configured()
    assert not ApiConfig(selectedProvider="openrouter", openRouterApiKey="k").is_configured()
    assert not ApiConfig(selectedProvider="openrouter", openRouterModel="m").is_configured()


def test_provider_headers():
    gemini = ApiConfig(selectedProvider="gemini", geminiApiKey="g", openRouterApiKey="k")
    assert gemini.provider_headers() == {"X-Provider": "gemini", "X-API-Key": "g"}

    openrouter = ApiConfig(selectedProvider="openrouter", openRouterApiKey="k", openRouterModel="m")
    assert openrouter.provider_headers() == {
        "X-Provider": "openrouter",
        "Authorization": "Bearer k",
        "X-Model": "m",
    }
