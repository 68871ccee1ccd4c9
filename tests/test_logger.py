import logging

from utils.logger import get_logger, set_level


def test_set_level_and_transport_debug():
    get_logger(__name__)

    set_level("warning", debug_transport=True)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("telegram").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.DEBUG

    set_level("nonsense")
    assert logging.getLogger().level == logging.INFO


def test_set_level_ignores_names_that_are_not_levels():
    set_level("basicConfig")
    assert logging.getLogger().level == logging.INFO

    set_level("warn")
    assert logging.getLogger().level == logging.WARNING

    set_level("INFO")
