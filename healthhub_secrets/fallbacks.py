# =============================================================================
# Environment fallbacks used when Secrets Manager cannot serve a provider secret
# =============================================================================

import os
from dataclasses import dataclass
from typing import Callable, Mapping

Resolver = Callable[[Mapping[str, str]], dict]


@dataclass(frozen=True)
class FallbackRule:
    pattern: str            # matched as a substring of the secret name
    provider: str
    resolve: Resolver

    def matches(self, secret_name: str) -> bool:
        return self.pattern in secret_name


def from_env(**fields: str) -> Resolver:
    """Builds a resolver mapping credential field -> environment variable name."""

    def resolve(environ: Mapping[str, str]) -> dict:
        return {field: environ.get(variable) for field, variable in fields.items()}

    return resolve


DEFAULT_FALLBACKS: tuple[FallbackRule, ...] = (
    FallbackRule(
        "openai",
        "openai",
        from_env(api_key="OPEN_AI_KEY", assistant_id="ASSISTANT_ID"),
    ),
    FallbackRule(
        "azure-speech",
        "azure_speech",
        from_env(speech_key="AZURE_SPEECH_KEY", speech_region="AZURE_SPEECH_REGION"),
    ),
    FallbackRule(
        "google-vision",
        "google_vision",
        from_env(
            project_id="GOOGLE_PROJECT_ID",
            private_key="GOOGLE_PRIVATE_KEY",
            client_email="GOOGLE_CLIENT_EMAIL",
        ),
    ),
)


def find_fallback(secret_name: str, rules=DEFAULT_FALLBACKS) -> FallbackRule | None:
    """First rule whose pattern occurs in the secret name, or None."""
    for rule in rules:
        if rule.matches(secret_name):
            return rule
    return None


def resolve_fallback(rule: FallbackRule, environ: Mapping[str, str] | None = None) -> dict:
    return rule.resolve(os.environ if environ is None else environ)
