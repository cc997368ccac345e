#!/usr/bin/env python3
"""
Credential check script

Reads every provider secret HealthHub uses straight from AWS Secrets Manager
(environment fallbacks disabled) and reports which ones resolve:
1. OpenAI (api_key, assistant_id)
2. Azure Speech (speech_key, speech_region)
3. Google Vision (service-account JSON)

Usage: python -m healthhub_secrets.check_credentials [region]
Example: python -m healthhub_secrets.check_credentials us-east-1
"""

import sys
from dataclasses import replace

from .config import SecretsConfig
from .lambda_function import PROVIDERS, provider_status
from .secret_store import SecretsManagerStore
from .secrets_cache import SecretCache


# Color codes
class Colors:
    RED = '\033[0;31m'
    GREEN = '\033[0;32m'
    YELLOW = '\033[1;33m'
    BLUE = '\033[0;34m'
    NC = '\033[0m'


def print_color(message, color):
    """Print colored message"""
    print(f"{color}{message}{Colors.NC}")


def build_cache(config, store=None):
    """Cache with no fallbacks, so an unreadable secret shows up as an error"""
    store = store or SecretsManagerStore.from_config(config)
    return SecretCache(store, config=config, fallbacks=())


def secret_name_for(config, provider):
    return {
        "openai": config.openai_secret_name,
        "azure_speech": config.azure_secret_name,
        "google_vision": config.google_secret_name,
    }[provider]


def check_all(cache):
    """Check each provider, print a line per provider, return True if all resolved"""
    all_ok = True
    for provider in PROVIDERS:
        secret_name = secret_name_for(cache.config, provider)
        status = provider_status(cache, provider)
        if status["configured"]:
            print_color(f"✓ {provider}: {secret_name}", Colors.GREEN)
        elif "error" in status:
            print_color(f"✗ {provider}: {secret_name} ({status['error']})", Colors.RED)
            all_ok = False
        else:
            print_color(f"! {provider}: {secret_name} has no usable key", Colors.YELLOW)
            all_ok = False
    return all_ok


def main(argv=None, store=None):
    """Main check function"""
    argv = sys.argv[1:] if argv is None else argv

    config = SecretsConfig.from_env()
    if argv:
        config = replace(config, aws_region=argv[0])

    print_color("=" * 40, Colors.BLUE)
    print_color("HealthHub Credential Check", Colors.BLUE)
    print_color("=" * 40, Colors.BLUE)
    print(f"Region: {config.aws_region}")
    print()

    if check_all(build_cache(config, store)):
        print()
        print_color("All provider credentials resolved", Colors.GREEN)
        return 0

    print()
    print_color("Some provider credentials are missing", Colors.RED)
    print("Update them in Secrets Manager or set the matching environment variables")
    return 1


if __name__ == '__main__':
    sys.exit(main())
