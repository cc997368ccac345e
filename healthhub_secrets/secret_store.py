# =============================================================================
# AWS Secrets Manager adapter
# Purpose: the only place that talks to boto3. Turns botocore failures into
#          the errors the credential cache understands.
# =============================================================================

import boto3                                    # AWS SDK, talks to Secrets Manager
from botocore.exceptions import BotoCoreError, ClientError

from .config import SecretsConfig
from .errors import SecretNotFound, SecretStoreError, StoreUnavailable

NOT_FOUND_CODES = {"ResourceNotFoundException"}


class SecretsManagerStore:
    """
    Thin wrapper around a boto3 ``secretsmanager`` client.

    ``fetch`` returns the raw ``SecretString`` (``None`` for binary-only
    secrets); decoding is left to the cache.
    """

    def __init__(self, client):
        self._client = client

    @classmethod
    def from_config(cls, config: SecretsConfig) -> "SecretsManagerStore":
        return cls(boto3.client("secretsmanager", region_name=config.aws_region))

    def fetch(self, identifier: str) -> str | None:
        try:
            response = self._client.get_secret_value(SecretId=identifier)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            if code in NOT_FOUND_CODES:
                raise SecretNotFound(identifier) from e
            raise SecretStoreError(identifier, f"Secrets Manager returned {code} for '{identifier}'") from e
        except BotoCoreError as e:
            # Endpoint, connection and missing-credential failures all land here
            raise StoreUnavailable(identifier, f"Secrets Manager unreachable for '{identifier}': {e}") from e

        return response.get("SecretString")
