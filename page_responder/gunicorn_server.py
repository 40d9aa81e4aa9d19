import logging

import gunicorn.app.base

from page_responder.wsgi import handler_app

logger = logging.getLogger(__name__)


class StandaloneApplication(gunicorn.app.base.BaseApplication):
    """Run a WSGI app under gunicorn without a config file or command line."""

    def __init__(self, app, options=None):
        self.options = options or {}
        self.application = app
        super().__init__()

    def load_config(self):
        config = {key: value for key, value in self.options.items()
                  if key in self.cfg.settings and value is not None}
        for key, value in config.items():
            self.cfg.set(key.lower(), value)

    def load(self):
        return self.application


def main(host='0.0.0.0', port=8080, workers=2, threads=1):
    options = {
        'bind': '%s:%s' % (host, port),
        'workers': workers,
        'threads': threads
    }
    logger.info(f"gunicorn serving on {options['bind']} with {workers} workers, {threads} threads each")
    StandaloneApplication(handler_app, options).run()


if __name__ == '__main__':
    main()
