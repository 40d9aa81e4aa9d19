import logging

from page_responder.page import handle_request

logger = logging.getLogger(__name__)


def handler_app(environ, start_response):
    response = handle_request(environ)
    response_body = response.body.encode("utf-8")
    status = '200 OK'

    response_headers = list(response.headers)

    start_response(status, response_headers)
    logger.debug(f"{environ.get('REQUEST_METHOD')} {environ.get('PATH_INFO')} -> {status}")

    return [response_body]
