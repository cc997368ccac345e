# =============================================================================
# Credential cache: provider credentials from AWS Secrets Manager
# Purpose: serve OpenAI / Azure / Google credentials with at most one Secrets
#          Manager call per secret every five minutes, falling back to
#          environment variables for known providers when the store is down.
# =============================================================================

import json
import time
from dataclasses import dataclass

import structlog

from .config import SecretsConfig
from .errors import MalformedPayload, SecretStoreError
from .fallbacks import DEFAULT_FALLBACKS, find_fallback, resolve_fallback

logger = structlog.get_logger(__name__)

CACHE_TTL_SECONDS = 5 * 60


@dataclass
class CacheEntry:
    key: str
    value: dict
    fetched_at: float

    def is_fresh(self, now: float, ttl: float) -> bool:
        return now - self.fetched_at < ttl


def decode_payload(secret_name: str, payload: str | None) -> dict:
    """
    The secret is stored as a JSON string → convert to a Python dict.
    An empty secret decodes to {}; anything that is not a JSON object is
    rejected.
    """
    if not payload:
        return {}
    try:
        value = json.loads(payload)
    except (ValueError, RecursionError) as e:
        # Deeply nested JSON exhausts the decoder's recursion limit
        raise MalformedPayload(secret_name, f"Secret '{secret_name}' is not valid JSON") from e
    if not isinstance(value, dict):
        raise MalformedPayload(
            secret_name, f"Secret '{secret_name}' decoded to {type(value).__name__}, expected an object"
        )
    return value


def _pick(value: dict, field: str, alias: str | None = None) -> str | None:
    """
    Reads one credential field, trying ``alias`` when ``field`` is absent.
    Anything that is not a string comes back as None (and is logged), so a
    caller sees the field as missing rather than receiving a nested object.
    """
    key = field if field in value or alias is None else alias
    picked = value.get(key)
    if picked is None or isinstance(picked, str):
        return picked
    logger.warning("secret_field_not_string", field=key, type=type(picked).__name__)
    return None


class SecretCache:
    """
    In-memory, per-process cache in front of a secret store.

    ``store`` is anything with ``fetch(identifier) -> str | None`` raising
    :class:`SecretStoreError` subclasses (see ``SecretsManagerStore``).
    ``clock`` returns seconds and is only swapped out in tests.

    Not thread-safe: one Lambda container serves one request at a time.
    """

    def __init__(
        self,
        store,
        config: SecretsConfig | None = None,
        fallbacks=DEFAULT_FALLBACKS,
        ttl: float = CACHE_TTL_SECONDS,
        clock=time.time,
    ):
        self.store = store
        self.config = config or SecretsConfig.from_env()
        self.fallbacks = tuple(fallbacks)
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self):
        return len(self._entries)

    def __contains__(self, secret_name):
        return secret_name in self._entries

    # -------------------------------------------------------------------------
    # Core lookup
    # -------------------------------------------------------------------------
    def get_secret(self, secret_name: str) -> dict:
        """
        Returns the credential mapping stored under ``secret_name``.

        A fresh cache entry is returned without touching the store. Otherwise
        the store is called once; on failure a matching fallback rule supplies
        values from the environment (not cached), and any other name re-raises
        the store error.

        A cache hit hands back the cached dict itself; mutating it changes
        what later callers see until the entry goes stale. The provider
        helpers below return copies.
        """
        if not secret_name or not secret_name.strip():
            raise ValueError("secret_name must be a non-empty string")

        entry = self._entries.get(secret_name)
        if entry is not None and entry.is_fresh(self._clock(), self.ttl):
            return entry.value

        logger.info("secret_fetch_started", secret_name=secret_name)
        try:
            value = decode_payload(secret_name, self.store.fetch(secret_name))
        except SecretStoreError as e:
            logger.error("secret_fetch_failed", secret_name=secret_name, error=type(e).__name__)
            rule = find_fallback(secret_name, self.fallbacks)
            if rule is None:
                raise
            logger.warning("secret_fallback_used", secret_name=secret_name, provider=rule.provider)
            return resolve_fallback(rule)

        self._entries[secret_name] = CacheEntry(secret_name, value, self._clock())
        logger.info("secret_fetch_succeeded", secret_name=secret_name)
        return value

    def clear(self) -> None:
        """Forget every cached secret; the next lookup of each name hits the store."""
        self._entries.clear()
        logger.info("secret_cache_cleared")

    # -------------------------------------------------------------------------
    # Provider helpers
    # -------------------------------------------------------------------------
    def get_openai_credentials(self, secret_name: str | None = None) -> dict:
        value = self.get_secret(secret_name or self.config.openai_secret_name)
        return {
            "api_key": _pick(value, "api_key", "apiKey"),
            "assistant_id": _pick(value, "assistant_id", "assistantId"),
        }

    def get_azure_speech_credentials(self, secret_name: str | None = None) -> dict:
        value = self.get_secret(secret_name or self.config.azure_secret_name)
        return {
            "speech_key": _pick(value, "speech_key", "speechKey"),
            "speech_region": _pick(value, "speech_region", "speechRegion"),
        }

    def get_google_vision_credentials(self, secret_name: str | None = None) -> dict:
        # Service-account JSON, passed through whole
        return dict(self.get_secret(secret_name or self.config.google_secret_name))
