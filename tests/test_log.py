import logging

from dtpredict.log import HANDLER_NAME, setup_logging


def test_setup_logging_adds_one_named_handler():
    setup_logging()
    logger = setup_logging("debug")
    named = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
    assert len(named) == 1
    assert logger.level == logging.DEBUG
