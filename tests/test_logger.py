import logging

from pomodoro.logger import HANDLER_NAME, configure_logging


def _file_handlers(logger: logging.Logger):
    return [h for h in logger.handlers if h.get_name() == HANDLER_NAME]


def test_single_handler_and_level(tmp_path) -> None:
    logger = logging.getLogger("pomodoro")
    for handler in _file_handlers(logger):
        logger.removeHandler(handler)

    configure_logging(debug=False, log_path=tmp_path / "p.log")
    assert logger.level == logging.WARNING

    configure_logging(debug=True, log_path=tmp_path / "p.log")
    assert logger.level == logging.DEBUG
    assert len(_file_handlers(logger)) == 1

    logging.getLogger("pomodoro.controller").debug("hello")
    for handler in _file_handlers(logger):
        handler.flush()
        handler.close()
        logger.removeHandler(handler)
    assert "hello" in (tmp_path / "p.log").read_text(encoding="utf-8")
