# =============================================================================
# Runtime configuration: everything comes from Lambda environment variables
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_AWS_REGION = "us-east-1"
DEFAULT_OPENAI_SECRET_NAME = "healthhub/dev/openai-credentials"
DEFAULT_AZURE_SECRET_NAME = "healthhub/dev/azure-speech-credentials"
DEFAULT_GOOGLE_SECRET_NAME = "healthhub/dev/google-vision-credentials"
DEFAULT_STAGE = "dev"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class SecretsConfig:
    aws_region: str = DEFAULT_AWS_REGION
    openai_secret_name: str = DEFAULT_OPENAI_SECRET_NAME
    azure_secret_name: str = DEFAULT_AZURE_SECRET_NAME
    google_secret_name: str = DEFAULT_GOOGLE_SECRET_NAME
    stage: str = DEFAULT_STAGE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SecretsConfig":
        """
        Reads the configuration from the process environment (or the mapping
        passed in). Empty variables count as unset.
        """
        env = os.environ if environ is None else environ

        def read(name, default):
            return env.get(name) or default

        return cls(
            aws_region=read("AWS_REGION", DEFAULT_AWS_REGION),
            openai_secret_name=read("OPENAI_SECRET_NAME", DEFAULT_OPENAI_SECRET_NAME),
            azure_secret_name=read("AZURE_SECRET_NAME", DEFAULT_AZURE_SECRET_NAME),
            google_secret_name=read("GOOGLE_SECRET_NAME", DEFAULT_GOOGLE_SECRET_NAME),
            stage=read("STAGE", DEFAULT_STAGE),
            log_level=read("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
