from healthhub_secrets import check_credentials
from healthhub_secrets.errors import StoreUnavailable


def _fill(store) -> None:
    store.put("healthhub/dev/openai-credentials", {"api_key": "sk-1", "assistant_id": "asst-1"})
    store.put("healthhub/dev/azure-speech-credentials", {"speech_key": "az", "speech_region": "eastus"})
    store.put("healthhub/dev/google-vision-credentials", {"private_key": "pk"})


def test_all_resolved(store, capsys) -> None:
    _fill(store)

    assert check_credentials.main(["eu-west-1"], store=store) == 0

    out = capsys.readouterr().out
    assert "Region: eu-west-1" in out
    assert "✓ openai: healthhub/dev/openai-credentials" in out
    assert "All provider credentials resolved" in out
    assert "sk-1" not in out


def test_store_failure_is_not_masked_by_environment(store, capsys, monkeypatch) -> None:
    _fill(store)
    monkeypatch.setenv("OPEN_AI_KEY", "sk-env")
    store.fail("healthhub/dev/openai-credentials", StoreUnavailable("healthhub/dev/openai-credentials"))

    assert check_credentials.main([], store=store) == 1

    out = capsys.readouterr().out
    assert "✗ openai: healthhub/dev/openai-credentials (StoreUnavailable)" in out
    assert "Region: us-east-1" in out


def test_secret_without_key_is_flagged(store, capsys) -> None:
    _fill(store)
    store.put("healthhub/dev/google-vision-credentials", {"project_id": "hh"})

    assert check_credentials.main([], store=store) == 1
    assert "! google_vision: healthhub/dev/google-vision-credentials has no usable key" in capsys.readouterr().out


def test_build_cache_disables_fallbacks(store, config) -> None:
    assert check_credentials.build_cache(config, store).fallbacks == ()
