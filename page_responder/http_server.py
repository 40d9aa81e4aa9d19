import logging
from http.server import ThreadingHTTPServer, BaseHTTPRequestHandler

from page_responder.page import handle_request

CHUNK_SIZE = 65536

logger = logging.getLogger(__name__)


class PageRequestHandler(BaseHTTPRequestHandler):
    """Serves the test page for every method and path."""

    def do_GET(self):
        self._send_page()

    def do_HEAD(self):
        self._send_page(include_body=False)

    def __getattr__(self, name):
        # BaseHTTPRequestHandler looks up do_<METHOD>; any other method gets the page too
        if name.startswith('do_'):
            return self._send_page
        raise AttributeError(name)

    def _send_page(self, include_body=True):
        self._discard_body()
        response = handle_request()

        self.send_response(200)
        for name, value in response.headers:
            self.send_header(name, value)
        self.end_headers()

        if include_body:
            self.wfile.write(bytes(response.body, "utf-8"))

    def _discard_body(self):
        # Unread request bytes would make the close reset the connection
        try:
            remaining = int(self.headers.get('Content-Length') or 0)
        except ValueError:
            return

        while remaining > 0:
            chunk = self.rfile.read(min(remaining, CHUNK_SIZE))
            if not chunk:
                break
            remaining -= len(chunk)

    def log_message(self, format, *args):
        logger.debug(f"{self.address_string()} {format % args}")


def make_server(host='0.0.0.0', port=8080):
    return ThreadingHTTPServer((host, port), PageRequestHandler)


def main(host='0.0.0.0', port=8080):
    httpd = make_server(host, port)
    logger.info(f"HTTP server listening on {host}:{port}")
    try:
        httpd.serve_forever()
    finally:
        httpd.server_close()


if __name__ == "__main__":
    main()
