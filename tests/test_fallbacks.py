import pytest

from healthhub_secrets.fallbacks import DEFAULT_FALLBACKS, FallbackRule, find_fallback, from_env, resolve_fallback


@pytest.mark.parametrize(
    "secret_name, provider",
    [
        ("healthhub/dev/openai-credentials", "openai"),
        ("healthhub/production/openai", "openai"),
        ("healthhub/production/azure-speech-credentials", "azure_speech"),
        ("healthhub/dev/google-vision-credentials", "google_vision"),
    ],
)
def test_known_providers_match(secret_name: str, provider: str) -> None:
    rule = find_fallback(secret_name)
    assert rule is not None
    assert rule.provider == provider


@pytest.mark.parametrize(
    "secret_name",
    ["healthhub/dev/azure-credentials", "healthhub/dev/database", "OPENAI-upper-case"],
)
def test_other_names_have_no_fallback(secret_name: str) -> None:
    assert find_fallback(secret_name) is None


def test_first_matching_rule_wins() -> None:
    rules = (
        FallbackRule("openai", "first", from_env(api_key="A")),
        FallbackRule("openai", "second", from_env(api_key="B")),
    )
    assert find_fallback("x/openai", rules).provider == "first"


def test_resolve_reads_given_environment() -> None:
    rule = find_fallback("healthhub/dev/openai-credentials")
    environ = {"OPEN_AI_KEY": "sk-env"}

    assert resolve_fallback(rule, environ) == {"api_key": "sk-env", "assistant_id": None}


def test_resolve_defaults_to_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("GOOGLE_PROJECT_ID", "hh-project")
    monkeypatch.setenv("GOOGLE_CLIENT_EMAIL", "svc@hh-project.iam.gserviceaccount.com")
    rule = find_fallback("healthhub/dev/google-vision-credentials")

    assert resolve_fallback(rule) == {
        "project_id": "hh-project",
        "private_key": None,
        "client_email": "svc@hh-project.iam.gserviceaccount.com",
    }


def test_default_table_order() -> None:
    assert [rule.pattern for rule in DEFAULT_FALLBACKS] == ["openai", "azure-speech", "google-vision"]
