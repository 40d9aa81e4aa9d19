import sys

from page_responder.page import handle_request


def main(stream=None):
    # stdout is the response, so nothing else may be printed here
    if stream is None:
        stream = sys.stdout

    response = handle_request()

    for name, value in response.headers:
        stream.write(f"{name}: {value}\r\n")
    stream.write("\r\n")  # Empty line with CRLF required between headers and body
    stream.write(response.body)
    stream.flush()


if __name__ == "__main__":
    main()
