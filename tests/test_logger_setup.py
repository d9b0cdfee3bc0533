import logging

from public_optimizer.logger_setup import LevelColorFormatter, setup_logger


def test_handlers_are_not_duplicated():
    logger = setup_logger("test-dup")
    count = len(logger.handlers)
    setup_logger("test-dup")
    assert len(logger.handlers) == count == 1


def test_file_handler_writes_plain_text(tmp_path):
    log_file = tmp_path / "optimizer.log"
    logger = setup_logger("test-file", log_file=str(log_file))
    logger.info("hello file")
    for h in logger.handlers:
        h.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "| INFO     | hello file" in text
    assert "\033[" not in text

    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)


def test_formatter_colors_only_level_name():
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
    out = LevelColorFormatter("%(levelname)s %(message)s").format(record)

    assert out == "\033[91mERROR\033[0m boom"
    assert record.levelname == "ERROR"
