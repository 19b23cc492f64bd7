#!/usr/bin/env python3
"""Serve the page handlers on localhost for development.

Each browser request is translated into an API Gateway HTTP API (v2) event and
dispatched to the matching handler module, so the handlers run exactly as they
would behind API Gateway.

Usage:
    python scripts/run_local_server.py [--port 3000]
"""

import argparse
import base64
import logging
import re
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import parse_qsl, urlsplit

from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

load_dotenv()

from handlers import dashboard, home, login, logout, trip_detail, trip_new, trips, trips_map  # noqa: E402

logger = logging.getLogger("tumaps.local")

ROUTES = [
    ("GET", re.compile(r"^/$"), home),
    ("GET", re.compile(r"^/login$"), login),
    ("POST", re.compile(r"^/login$"), login),
    ("POST", re.compile(r"^/logout$"), logout),
    ("GET", re.compile(r"^/dashboard$"), dashboard),
    ("GET", re.compile(r"^/trips$"), trips),
    ("GET", re.compile(r"^/trips/new$"), trip_new),
    ("POST", re.compile(r"^/trips/new$"), trip_new),
    ("GET", re.compile(r"^/trips/(?P<trip_id>[^/]+)$"), trip_detail),
    ("GET", re.compile(r"^/api/trips/map$"), trips_map),
]


def match_route(method: str, path: str):
    for route_method, pattern, module in ROUTES:
        match = pattern.match(path)
        if match and route_method == method:
            return module, match.groupdict()
    return None, {}


def build_event(method: str, raw_path: str, headers: dict[str, str], body: bytes, path_params: dict[str, str]):
    parts = urlsplit(raw_path)
    cookie_header = headers.get("cookie", "")
    return {
        "version": "2.0",
        "rawPath": parts.path,
        "rawQueryString": parts.query,
        "queryStringParameters": dict(parse_qsl(parts.query)) or None,
        "pathParameters": path_params or None,
        "headers": headers,
        "cookies": [c.strip() for c in cookie_header.split(";") if c.strip()] or None,
        "requestContext": {"http": {"method": method, "path": parts.path}},
        "body": base64.b64encode(body).decode("ascii") if body else None,
        "isBase64Encoded": bool(body),
    }


class LambdaProxyHandler(BaseHTTPRequestHandler):
    def _dispatch(self, method: str) -> None:
        path = urlsplit(self.path).path
        module, path_params = match_route(method, path)
        if module is None:
            self.send_error(404)
            return

        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        headers = {k.lower(): v for k, v in self.headers.items()}
        event = build_event(method, self.path, headers, body, path_params)

        try:
            response = module.handler(event, None)
        except Exception:
            logger.exception("Unhandled error in %s", module.__name__)
            self.send_error(500)
            return

        payload = (response.get("body") or "").encode("utf-8")
        self.send_response(response.get("statusCode", 200))
        for name, value in (response.get("headers") or {}).items():
            self.send_header(name, value)
        for cookie in response.get("cookies") or []:
            self.send_header("Set-Cookie", cookie)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def do_GET(self):
        self._dispatch("GET")

    def do_POST(self):
        self._dispatch("POST")

    def log_message(self, format, *args):
        logger.info("%s %s", self.address_string(), format % args)


def main():
    parser = argparse.ArgumentParser(description="Run tumaps handlers locally")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")
    server = ThreadingHTTPServer((args.host, args.port), LambdaProxyHandler)
    print(f"tumaps running at http://{args.host}:{args.port}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
