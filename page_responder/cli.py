import sys
import logging
import argparse

from page_responder import cgi_script, http_server

SERVERS = ["http", "flask", "gunicorn", "cgi"]


def setup_logger(name, log_file, level=logging.INFO):
    """Send one named logger (and its children) to its own file, truncated on start."""

    handler = logging.FileHandler(log_file, mode='w')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.addHandler(handler)

    return logger


def configure_logging(logs_path=None):
    # Adapters log under page_responder.*
    if logs_path:
        return setup_logger("page_responder", logs_path, level=logging.DEBUG)

    logging.basicConfig(level=logging.INFO)
    return logging.getLogger("page_responder")


def get_args(argv=None):
    parser = argparse.ArgumentParser(description="Serve the static test page")
    parser.add_argument("-server", "--server", dest = "server", choices = SERVERS, default = "http", help = "How the page is hosted")
    parser.add_argument("-ip", "--ip", dest = "ip", default = "0.0.0.0", help = "Use a defined IP")
    parser.add_argument("-port", "--port", dest = "port", type = int, default = 8080, help = "Port to listen on")
    parser.add_argument("-workers", "--workers", dest = "workers", type = int, default = 2, help = "gunicorn worker processes")
    parser.add_argument("-threads", "--threads", dest = "threads", type = int, default = 1, help = "gunicorn threads per worker")
    parser.add_argument("-logsPath", "--logsPath", dest = "logs_path", help = "Define a path for logs storage")
    options = parser.parse_args(argv)

    return options


def run(options):
    if options.server == "cgi":
        cgi_script.main()
    elif options.server == "flask":
        # flask and gunicorn are only loaded when selected
        from page_responder import flask_server
        flask_server.main(host=options.ip, port=options.port)
    elif options.server == "gunicorn":
        from page_responder import gunicorn_server
        gunicorn_server.main(host=options.ip, port=options.port,
                             workers=options.workers, threads=options.threads)
    else:
        http_server.main(host=options.ip, port=options.port)


def main(argv=None):
    options = get_args(argv)
    configure_logging(options.logs_path)

    try:
        run(options)
    except KeyboardInterrupt:
        print("Ctrl C - Stopping page responder")
        sys.exit(1)


if __name__ == '__main__':
    main()
