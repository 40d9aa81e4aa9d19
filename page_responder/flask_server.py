import logging

from flask import Flask, Response, request

from page_responder.page import handle_request

METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

logger = logging.getLogger(__name__)

app = Flask(__name__)


def page_response():
    response = handle_request()
    logger.debug(f"{request.method} {request.path} -> 200")
    return Response(response.body, headers=list(response.headers))


# Every path and method gets the same page
@app.route('/', defaults={'path': ''}, methods=METHODS)
@app.route('/<path:path>', methods=METHODS)
def test_page(path):
    return page_response()


# Methods outside the route list (TRACE, PROPFIND, ...) land here
@app.errorhandler(405)
def any_other_method(error):
    return page_response()


def main(host='0.0.0.0', port=8080):
    logger.info(f"Flask server listening on {host}:{port}")
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
