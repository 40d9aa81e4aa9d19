from page_responder.page import CONTENT_TYPE, TEST_PAGE, Response, handle_request

__all__ = ["CONTENT_TYPE", "TEST_PAGE", "Response", "handle_request"]
