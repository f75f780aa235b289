"""Threaded HTTP front end for the image service."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

from .session import ImageService

log = logging.getLogger(__name__)

DEFAULT_PORT = 8080


class _ServiceHTTPServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address, handler_class, service: ImageService) -> None:
        self.service = service
        super().__init__(address, handler_class)


class RequestHandler(BaseHTTPRequestHandler):
    """Passes each request to the server's ``ImageService`` and writes its reply."""

    protocol_version = "HTTP/1.1"
    server_version = "ImageService"

    def _dispatch(self) -> None:
        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            self.send_error(HTTPStatus.BAD_REQUEST, "Invalid Content-Length")
            return
        body = self.rfile.read(length) if length > 0 else b""
        response = self.server.service.handle(self.command, self.path, body)
        self.send_response(response.status)
        self.send_header("Content-Type", response.content_type)
        self.send_header("Content-Length", str(len(response.body)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(response.body)

    do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = do_OPTIONS = do_HEAD = _dispatch

    def log_message(self, format: str, *args) -> None:
        log.info("%s - %s", self.address_string(), format % args)


def make_server(service: ImageService, host: str, port: int) -> ThreadingHTTPServer:
    """Bind a threaded HTTP server for ``service`` on ``host``:``port``."""
    return _ServiceHTTPServer((host, port), RequestHandler, service)


def main(argv: list[str] | None = None) -> int:
    """Run the server until ENTER is pressed on standard input."""
    parser = argparse.ArgumentParser(description="Serve image upload and processing requests.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--media-dir", default="media")
    args = parser.parse_args(argv)

    try:
        media = Path(args.media_dir)
        media.mkdir(parents=True, exist_ok=True)
        server = make_server(ImageService(media), args.host, args.port)
    except OSError as exc:
        print(f"Exception: {exc}", file=sys.stderr)
        return 1

    with server:
        print(f"Server started on port {server.server_address[1]}")
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        print("[SERVER] Press ENTER to stop the server...")
        try:
            input()
        except EOFError:
            pass
        server.shutdown()
        thread.join()
    print("[SERVER] Server stopped...")
    return 0