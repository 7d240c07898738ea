#!/usr/bin/env python3
"""
Create a link token without the client: build the request, send it with
plain requests, and parse the response.

Usage:
    python sansio.py
"""

import sys

import requests

from plaid_client import CreateLinkTokenRequest, Credentials, Environment, HttpResponse, LinkUser, api


def http_send(session: requests.Session, request) -> HttpResponse:
    response = session.request(request.method, request.url, data=request.body, headers=request.headers)
    return HttpResponse(
        status=response.status_code,
        headers=dict(response.headers),
        body=response.content,
    )


def main():
    conf = api.Conf(credentials=Credentials.from_env(), environment=Environment.SANDBOX)

    req = CreateLinkTokenRequest(
        client_name="test-client",
        country_codes=["US"],
        language="en",
        products=["transactions"],
        user=LinkUser(client_user_id="test-user"),
    )

    http_req = api.create_link_token(conf, req)
    with requests.Session() as session:
        response = api.create_link_token_response(http_send(session, http_req))

    print(response)
    return 0


if __name__ == "__main__":
    sys.exit(main())
