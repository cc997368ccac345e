# =============================================================================
# HealthHub credential status server (Lambda)
# Purpose: report which AI provider credentials this deployment can resolve,
#          through the shared credential cache. Secret values never leave the
#          function: only a configured yes/no per provider.
#
# handle_status() takes the cache as an argument. lambda_handler() is the one
# place that reaches for the process-wide default cache and hands it in.
# =============================================================================

import json

import structlog

from .config import SecretsConfig
from .credentials import get_default_cache
from .errors import SecretStoreError
from .logging_config import configure_logging
from .secrets_cache import SecretCache

logger = structlog.get_logger(__name__)

# provider -> (SecretCache method, field that must be non-empty)
PROVIDERS = {
    "openai": ("get_openai_credentials", "api_key"),
    "azure_speech": ("get_azure_speech_credentials", "speech_key"),
    "google_vision": ("get_google_vision_credentials", "private_key"),
}

_logging_configured = False


# -----------------------------------------------------------------------------
# Step 1: Resolve each provider and summarise what we found
# -----------------------------------------------------------------------------
def provider_status(cache: SecretCache, provider: str) -> dict:
    method_name, key_field = PROVIDERS[provider]
    try:
        credentials = getattr(cache, method_name)()
    except SecretStoreError as e:
        # The error class is enough for an operator; messages may name the secret
        return {"configured": False, "error": type(e).__name__}

    value = credentials.get(key_field)
    return {"configured": isinstance(value, str) and bool(value.strip())}


def handle_status(cache: SecretCache) -> dict:
    """Builds the API Gateway proxy response for a status request."""
    providers = {name: provider_status(cache, name) for name in PROVIDERS}
    logger.info(
        "credential_status_checked",
        configured=sorted(name for name, status in providers.items() if status["configured"]),
    )
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"providers": providers}),
    }


# -----------------------------------------------------------------------------
# Step 2: Main Lambda handler: AWS calls this function on every invoke
# -----------------------------------------------------------------------------
def lambda_handler(event, context):
    """
    Entry point for Lambda. The cache lives in a module global, so warm
    invocations reuse credentials fetched by earlier requests.
    """
    global _logging_configured

    if not _logging_configured:
        config = SecretsConfig.from_env()
        configure_logging("credential-status", config.stage, config.log_level)
        _logging_configured = True

    return handle_status(get_default_cache())
