from .config import SecretsConfig
from .credentials import (
    clear_cache,
    get_azure_speech_credentials,
    get_google_vision_credentials,
    get_openai_credentials,
    get_secret,
)
from .errors import MalformedPayload, SecretNotFound, SecretStoreError, StoreUnavailable
from .secret_store import SecretsManagerStore
from .secrets_cache import CACHE_TTL_SECONDS, SecretCache

__all__ = [
    "CACHE_TTL_SECONDS",
    "MalformedPayload",
    "SecretCache",
    "SecretNotFound",
    "SecretStoreError",
    "SecretsConfig",
    "SecretsManagerStore",
    "StoreUnavailable",
    "clear_cache",
    "get_azure_speech_credentials",
    "get_google_vision_credentials",
    "get_openai_credentials",
    "get_secret",
]
