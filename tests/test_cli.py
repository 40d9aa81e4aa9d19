import logging

import pytest

from page_responder import cli, http_server, cgi_script, flask_server, gunicorn_server


def test_defaults():
    options = cli.get_args([])

    assert options.server == "http"
    assert options.ip == "0.0.0.0"
    assert options.port == 8080
    assert options.workers == 2
    assert options.threads == 1
    assert options.logs_path is None


def test_short_and_long_options():
    options = cli.get_args(["-server", "gunicorn", "--ip", "127.0.0.1", "-port", "9000",
                            "--workers", "4", "-threads", "8", "--logsPath", "x.log"])

    assert options.server == "gunicorn"
    assert options.ip == "127.0.0.1"
    assert options.port == 9000
    assert options.workers == 4
    assert options.threads == 8
    assert options.logs_path == "x.log"


def test_unknown_server_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        cli.get_args(["--server", "nginx"])

    assert excinfo.value.code == 2


@pytest.fixture
def calls(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "configure_logging", lambda logs_path=None: calls.append(("logging", logs_path)))
    monkeypatch.setattr(http_server, "main", lambda **kw: calls.append(("http", kw)))
    monkeypatch.setattr(cgi_script, "main", lambda: calls.append(("cgi", {})))
    monkeypatch.setattr(flask_server, "main", lambda **kw: calls.append(("flask", kw)))
    monkeypatch.setattr(gunicorn_server, "main", lambda **kw: calls.append(("gunicorn", kw)))
    return calls


def test_main_dispatches_to_http_server(calls):
    cli.main(["--port", "8001"])

    assert calls == [("logging", None), ("http", {"host": "0.0.0.0", "port": 8001})]


def test_main_dispatches_to_flask(calls):
    cli.main(["--server", "flask", "--ip", "127.0.0.1"])

    assert calls[1] == ("flask", {"host": "127.0.0.1", "port": 8080})


def test_main_dispatches_to_gunicorn(calls):
    cli.main(["--server", "gunicorn", "--workers", "3", "--threads", "5"])

    assert calls[1] == ("gunicorn", {"host": "0.0.0.0", "port": 8080, "workers": 3, "threads": 5})


def test_main_dispatches_to_cgi(calls):
    cli.main(["--server", "cgi", "--logsPath", "cgi.log"])

    assert calls == [("logging", "cgi.log"), ("cgi", {})]


def test_keyboard_interrupt_exits_with_status_1(monkeypatch, capsys):
    def interrupted(**kw):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "configure_logging", lambda logs_path=None: None)
    monkeypatch.setattr(http_server, "main", interrupted)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 1
    assert "Stopping page responder" in capsys.readouterr().out


@pytest.fixture
def package_logger():
    logger = logging.getLogger("page_responder")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


def test_logs_path_sends_adapter_logs_to_file(tmp_path, package_logger):
    log_file = tmp_path / "responder.log"

    logger = cli.configure_logging(str(log_file))
    logging.getLogger("page_responder.http_server").debug("served test page")
    for handler in logger.handlers:
        handler.flush()

    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert "page_responder.http_server: served test page" in log_file.read_text()


def test_log_file_is_truncated_on_start(tmp_path, package_logger):
    log_file = tmp_path / "responder.log"
    log_file.write_text("previous run\n")

    cli.setup_logger("page_responder", str(log_file), level=logging.INFO)

    assert "previous run" not in log_file.read_text()
