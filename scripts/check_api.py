"""Smoke check: list every collection against the configured backend.

Run from the project root (`python -m scripts.check_api`). Prints the API
address and the number of records per collection; exits non-zero when any
collection cannot be listed.
"""
import sys

from core.config import load_settings
from core.log_utils import configure_logging
from models import ENTITIES
from services.api_client import ApiClient
from services.errors import ApiError


def main() -> int:
    settings = load_settings()
    configure_logging(settings.log_level)
    client = ApiClient(settings.api_url)

    print("API:", settings.api_url)
    failures = 0
    for descriptor in ENTITIES:
        try:
            records = client.resource(descriptor.resource).list_all()
        except ApiError as e:
            print(f"{descriptor.plural}: FAILED ({e})")
            failures += 1
            continue
        count = len(records) if isinstance(records, list) else "unexpected body"
        print(f"{descriptor.plural}: {count}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
