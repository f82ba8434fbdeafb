import logging

from precisely import assert_that, contains_exactly, equal_to, has_attrs, is_instance

from bookmarkets.logging_config import setup_logging


def test_console_handler_is_added_with_level():
    logger = logging.Logger("bookmarkets-test")

    setup_logging("debug", logger=logger)

    assert_that(logger.handlers, contains_exactly(is_instance(logging.StreamHandler)))
    assert_that(logger.level, equal_to(logging.DEBUG))


def test_handler_formats_time_level_and_name():
    logger = logging.Logger("bookmarkets-test")

    setup_logging(logger=logger)

    assert_that(logger.handlers[0].formatter, has_attrs(
        _fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    ))


def test_logging_is_only_configured_once():
    logger = logging.Logger("bookmarkets-test")

    setup_logging("INFO", logger=logger)
    setup_logging("DEBUG", logger=logger)

    assert_that(len(logger.handlers), equal_to(1))
    assert_that(logger.level, equal_to(logging.INFO))


def test_unknown_level_falls_back_to_info():
    logger = logging.Logger("bookmarkets-test")

    setup_logging("chatty", logger=logger)

    assert_that(logger.level, equal_to(logging.INFO))
