#!/usr/bin/env python3
"""
Plug a preconfigured requests.Session into the client.

The session pools connections and retries failed connection attempts; the
client itself never retries.

Usage:
    python custom_transport.py
"""

import sys

import requests
from requests.adapters import HTTPAdapter

from plaid_client import (
    ClientError,
    Credentials,
    InstitutionsGetRequest,
    PlaidClient,
    RequestsTransport,
)


def make_session() -> requests.Session:
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=4, pool_maxsize=8, max_retries=3)
    session.mount("https://", adapter)
    return session


def main():
    session = make_session()
    transport = RequestsTransport(timeout=10.0, session=session)

    client = (
        PlaidClient.builder()
        .with_credentials(Credentials.from_env())
        .with_http_client(transport)
        .build()
    )

    try:
        institutions = client.get_institutions(
            InstitutionsGetRequest(count=10, offset=0, country_codes=["US"])
        )
    except ClientError as e:
        print(f"Request failed: {e}")
        return 1
    finally:
        session.close()

    print(institutions)
    return 0


if __name__ == "__main__":
    sys.exit(main())
