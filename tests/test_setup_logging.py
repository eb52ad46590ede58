import logging

from urlboard.logging_utils import setup_logging


def test_setup_logging_disabled_debug_off():
    lg = setup_logging(enabled=False, debug=False, logger_name="urlboard.test.off")
    assert lg.level in (logging.WARNING, logging.ERROR, logging.CRITICAL)
    assert all(isinstance(h, logging.NullHandler) for h in lg.handlers)


def test_setup_logging_enabled_debug_off():
    lg = setup_logging(enabled=True, debug=False, logger_name="urlboard.test.on", file_path=None)
    assert lg.level <= logging.INFO
    assert len(lg.handlers) == 1
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_setup_logging_enabled_debug_on(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    lg = setup_logging(enabled=True, debug=True, logger_name="urlboard.test.debug", file_path=str(log_file))
    assert lg.level <= logging.DEBUG
    assert len(lg.handlers) == 2
    lg.debug("hello file")
    for h in lg.handlers:
        h.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")
    for h in lg.handlers:
        h.close()


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging(enabled=True, logger_name="urlboard.test.twice", file_path=None)
    lg = setup_logging(enabled=True, logger_name="urlboard.test.twice", file_path=None)
    assert len(lg.handlers) == 1
