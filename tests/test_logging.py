import logging

from pgbee.utils.logging import ColoredFormatter, get_logger, setup_logging


def test_get_logger_names():
    assert get_logger().name == "pgbee"
    assert get_logger("pgbee.ui.controller").name == "pgbee.ui.controller"


def test_module_loggers_use_app_handlers(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    logger = setup_logging(level=logging.DEBUG, log_file=log_file)
    assert len(logger.handlers) == 2

    get_logger("pgbee.data.leaderboard").info("parsed rows")
    for handler in logger.handlers:
        handler.flush()
    assert "parsed rows" in log_file.read_text(encoding="utf-8")


def test_colored_formatter_wraps_message():
    record = logging.LogRecord("pgbee", logging.ERROR, __file__, 1, "boom", None, None)
    text = ColoredFormatter("%(message)s").format(record)
    assert text.startswith("\033[31m")
    assert text.endswith("\033[0m")
    assert "boom" in text
