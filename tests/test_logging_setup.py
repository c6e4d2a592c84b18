import logging
import logging.handlers

from grater.logging_setup import get_logger, setup_logging


def test_console_only_by_default():
    logger = setup_logging()
    assert logger.name == "grater"
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
    assert logger.handlers[0].level == logging.WARNING
    assert not logger.propagate


def test_rotating_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "grater.log"
    logger = setup_logging(str(log_file), "DEBUG", "DEBUG", max_log_size_mb=1, backup_count=2)

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 1024 * 1024
    assert file_handlers[0].backupCount == 2

    get_logger("grater.cursor").debug("moved")
    for handler in logger.handlers:
        handler.flush()
    assert "moved" in log_file.read_text(encoding="utf-8")
    for handler in file_handlers:
        handler.close()


def test_module_loggers_share_namespace():
    assert get_logger("grater.app").name == "grater.app"
    assert get_logger("cli").name == "grater.cli"
    assert get_logger().name == "grater"


def test_non_string_level_falls_back_to_info():
    logger = setup_logging(log_level=10)
    assert logger.level == logging.INFO
