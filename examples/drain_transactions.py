#!/usr/bin/env python3
"""
Sandbox walkthrough: create an Item, exchange its token and page through
every transaction.

Sandbox transactions are generated asynchronously; the first
/transactions/get call can fail with PRODUCT_NOT_READY, in which case rerun
after a few seconds.

Usage:
    python drain_transactions.py --start 2021-01-01 --end 2021-06-30 --page-size 50
"""

import argparse
import sys

from plaid_client import (
    AppError,
    ClientConfig,
    CreatePublicTokenRequest,
    Credentials,
    Environment,
    GetTransactionsOptions,
    GetTransactionsRequest,
    PlaidClient,
)

SANDBOX_INSTITUTION = "ins_129571"


def main():
    parser = argparse.ArgumentParser(description="Drain sandbox transactions page by page")
    parser.add_argument("--start", default="2021-01-01", help="Start date (YYYY-MM-DD)")
    parser.add_argument("--end", default="2021-06-30", help="End date (YYYY-MM-DD)")
    parser.add_argument("--page-size", type=int, default=100, help="Transactions per page")
    parser.add_argument("--debug", action="store_true", help="Log every request")
    args = parser.parse_args()

    client = (
        PlaidClient.builder()
        .with_credentials(Credentials.from_env())
        .with_env(Environment.SANDBOX)
        .with_config(ClientConfig(debug=args.debug))
        .build()
    )

    with client:
        public_token = client.create_public_token(CreatePublicTokenRequest(
            institution_id=SANDBOX_INSTITUTION,
            initial_products=["assets", "auth", "balance", "transactions"],
        ))
        access_token = client.exchange_public_token(public_token).access_token
        print(f"Item ready, {len(client.accounts(access_token))} accounts")

        request = GetTransactionsRequest(
            access_token=access_token,
            start_date=args.start,
            end_date=args.end,
            options=GetTransactionsOptions(count=args.page_size, offset=0),
        )

        total = 0
        try:
            for page_no, batch in enumerate(client.transactions_iter(request), 1):
                total += len(batch)
                print(f"page {page_no}: {len(batch)} transactions")
        except AppError as e:
            print(f"Stopped after {total} transactions: {e}")
            return 1

    print(f"Done: {total} transactions")
    return 0


if __name__ == "__main__":
    sys.exit(main())
