# =============================================================================
# Errors raised while reading credentials from the secret store
# =============================================================================


class SecretStoreError(Exception):
    """The secret store answered with an error or denied access."""

    def __init__(self, secret_name: str, message: str | None = None):
        self.secret_name = secret_name
        super().__init__(message or f"Could not read secret '{secret_name}'")


class SecretNotFound(SecretStoreError):
    """The store has no secret with this identifier."""

    def __init__(self, secret_name: str, message: str | None = None):
        super().__init__(secret_name, message or f"Secret '{secret_name}' does not exist")


class StoreUnavailable(SecretStoreError):
    """Network or service-level failure reaching the store."""


class MalformedPayload(SecretStoreError):
    """The store returned content that is not a JSON object."""
