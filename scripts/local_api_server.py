#!/usr/bin/env python3
"""
Local API Server

Serve the member Lambda handlers over plain HTTP for local development, so
the Streamlit frontend can run without API Gateway.

Usage:
    export CONGRESS_API_KEY=...
    python3 scripts/local_api_server.py --port 8000

Routes:
    GET /v1/members                 → api/lambdas/get_members
    GET /v1/members/{bioguide_id}   → api/lambdas/get_member
"""

import argparse
import http.server
import logging
import re
import sys
from pathlib import Path
from urllib.parse import parse_qsl, urlsplit

# Make api/ and ingestion/ importable when run as a script
sys.path.insert(0, str(Path(__file__).parent.parent))

from api.lambdas.get_member.handler import lambda_handler as get_member_handler  # noqa: E402
from api.lambdas.get_members.handler import lambda_handler as get_members_handler  # noqa: E402
from api.lib import add_cors_headers, error_response  # noqa: E402

logger = logging.getLogger(__name__)

MEMBER_PATH = re.compile(r"^/v1/members/(?P<bioguide_id>[A-Za-z0-9-]+)/?$")
MEMBERS_PATH = re.compile(r"^/v1/members/?$")


def build_event(path: str, query: str, path_params=None) -> dict:
    """Translate a request into an API Gateway v2 style event."""
    return {
        "rawPath": path,
        "queryStringParameters": dict(parse_qsl(query)) or None,
        "pathParameters": path_params,
        "requestContext": {"http": {"method": "GET", "path": path}},
    }


def route(path: str, query: str) -> dict:
    """Dispatch a GET to the matching handler and return its response dict."""
    if MEMBERS_PATH.match(path):
        return get_members_handler(build_event(path, query), None)

    match = MEMBER_PATH.match(path)
    if match:
        return get_member_handler(
            build_event(path, query, {"bioguide_id": match.group("bioguide_id")}), None
        )

    return error_response("NotFound", f"No route for {path}", status_code=404)


class LambdaProxyHandler(http.server.BaseHTTPRequestHandler):
    """Forward requests to Lambda handlers and write their responses."""

    def do_GET(self):
        parts = urlsplit(self.path)
        response = route(parts.path, parts.query)
        self._write(response)

    def do_OPTIONS(self):
        self._write(add_cors_headers({"statusCode": 204, "body": ""}))

    def _write(self, response: dict):
        body = (response.get("body") or "").encode("utf-8")
        self.send_response(response.get("statusCode", 200))
        for name, value in (response.get("headers") or {}).items():
            self.send_header(name, value)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if body:
            self.wfile.write(body)

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)


def main():
    parser = argparse.ArgumentParser(description="Run the members API locally")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    server = http.server.ThreadingHTTPServer((args.host, args.port), LambdaProxyHandler)
    logger.info(f"Serving members API on http://{args.host}:{args.port}/v1/members")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
