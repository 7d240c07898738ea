#!/usr/bin/env python3
"""
List supported institutions with a default-built client.

Reads PLAID_CLIENT_ID and PLAID_SECRET from the environment and, if set,
PLAID_ENV (sandbox, development, production or a base URL).

Usage:
    python builder.py --count 10
"""

import argparse
import sys

from plaid_client import (
    ClientError,
    ConfigError,
    Credentials,
    Environment,
    InstitutionsGetRequest,
    PlaidClient,
)


def main():
    parser = argparse.ArgumentParser(description="List Plaid institutions")
    parser.add_argument("--count", type=int, default=10, help="Institutions per page")
    parser.add_argument("--offset", type=int, default=0, help="Page offset")
    parser.add_argument("--country", action="append", default=None, help="Country code (repeatable)")
    args = parser.parse_args()

    try:
        credentials = Credentials.from_env()
        environment = Environment.from_env()
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return 1

    client = (
        PlaidClient.builder()
        .with_credentials(credentials)
        .with_env(environment)
        .build()
    )

    with client:
        try:
            institutions = client.get_institutions(InstitutionsGetRequest(
                count=args.count,
                offset=args.offset,
                country_codes=args.country or ["US"],
            ))
        except ClientError as e:
            print(f"Request failed: {e}")
            return 1

    for institution in institutions:
        print(f"{institution.institution_id:<14} {institution.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
