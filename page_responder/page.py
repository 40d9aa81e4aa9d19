from collections import namedtuple

CONTENT_TYPE = "text/html"

TEST_PAGE = (
    "<!DOCTYPE html>"
    "<html lang='en'>"
    "<head>"
    "<meta charset='UTF-8'>"
    "<meta name='viewport' content='width=device-width, initial-scale=1.0'>"
    "<title>Test CGI Script</title>"
    "</head>"
    "<body>"
    "<h1>Hello from test.php!</h1>"
    "<p>This is a simple CGI script running on the server.</p>"
    "</body>"
    "</html>"
)

Response = namedtuple("Response", ["headers", "body"])

# Tuples, so nothing a caller does to one response reaches the next
HEADERS = (("Content-Type", CONTENT_TYPE),)


def handle_request(*args, **kwargs):
    """Answer any request with the test page.

    Whatever the host passes in (environ, request object, nothing) is ignored.
    """
    return Response(headers=HEADERS, body=TEST_PAGE)
