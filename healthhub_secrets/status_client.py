# status_client.py: run this on your laptop or any server
# Anyone whose AWS account (or IAM user/role) may invoke the credential status
# endpoint can check which provider credentials the deployment resolves.

import sys

import boto3                # Signs the HTTP request with your AWS credentials (SigV4)
import requests
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest

from .config import DEFAULT_AWS_REGION


# ------------------------------------------------------------------
# 1. Helper: signs the request with IAM (no secrets in code)
# ------------------------------------------------------------------
def signed_get(url, region=DEFAULT_AWS_REGION, session=None):
    session = session or boto3.Session()          # uses your local AWS credentials (aws configure)
    credentials = session.get_credentials()
    request = AWSRequest(method="GET", url=url, headers={"Accept": "application/json"})
    SigV4Auth(credentials, "execute-api", region).add_auth(request)
    prep = request.prepare()
    return requests.get(prep.url, headers=dict(prep.headers))


# ------------------------------------------------------------------
# 2. Ask the status Lambda what it can resolve
# ------------------------------------------------------------------
def get_credential_status(url, region=DEFAULT_AWS_REGION, session=None):
    r = signed_get(url, region, session)
    r.raise_for_status()
    return r.json()["providers"]


# ------------------------------------------------------------------
# 3. Run it
# ------------------------------------------------------------------
def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: python -m healthhub_secrets.status_client <status-url> [region]")
        return 1

    url = argv[0]
    region = argv[1] if len(argv) > 1 else DEFAULT_AWS_REGION
    providers = get_credential_status(url, region)
    for name, status in sorted(providers.items()):
        state = "configured" if status["configured"] else status.get("error", "missing")
        print(f"{name}: {state}")
    return 0 if all(status["configured"] for status in providers.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
