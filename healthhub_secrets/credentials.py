# =============================================================================
# Process-wide credential helpers
#
# Lambda keeps module globals alive between invocations when the container is
# reused, so the default cache built here is shared by every warm request.
# Handlers that need a different store or clock should build their own
# SecretCache and pass it around instead.
# =============================================================================

from .config import SecretsConfig
from .secret_store import SecretsManagerStore
from .secrets_cache import SecretCache

_default_cache: SecretCache | None = None


def get_default_cache() -> SecretCache:
    """Builds the shared cache on first use from the environment."""
    global _default_cache

    if _default_cache is None:
        config = SecretsConfig.from_env()
        _default_cache = SecretCache(SecretsManagerStore.from_config(config), config=config)
    return _default_cache


def set_default_cache(cache: SecretCache | None) -> None:
    global _default_cache
    _default_cache = cache


def get_secret(secret_name: str) -> dict:
    return get_default_cache().get_secret(secret_name)


def get_openai_credentials() -> dict:
    """Returns {"api_key": ..., "assistant_id": ...}; either may be None."""
    return get_default_cache().get_openai_credentials()


def get_azure_speech_credentials() -> dict:
    return get_default_cache().get_azure_speech_credentials()


def get_google_vision_credentials() -> dict:
    return get_default_cache().get_google_vision_credentials()


def clear_cache() -> None:
    # No store client is needed just to clear, so don't build one
    if _default_cache is not None:
        _default_cache.clear()
