import logging
import os
import unittest
from unittest import mock

from kinexplorer.log import LOGGER_NAME, env_level, get_logger


class TestGetLogger(unittest.TestCase):
    def setUp(self):
        logger = logging.getLogger(LOGGER_NAME)
        saved_handlers = list(logger.handlers)
        saved_level = logger.level
        for handler in saved_handlers:
            logger.removeHandler(handler)

        def restore():
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            for handler in saved_handlers:
                logger.addHandler(handler)
            logger.setLevel(saved_level)

        self.addCleanup(restore)

    def test_single_handler(self):
        get_logger()
        logger = get_logger()
        self.assertEqual(len(logger.handlers), 1)

    def test_first_use_reads_environment(self):
        with mock.patch.dict(os.environ, {"KINEXPLORER_LOG_LEVEL": "info"}):
            self.assertEqual(env_level(), logging.INFO)
            self.assertEqual(get_logger().level, logging.INFO)

    def test_later_call_keeps_explicit_level(self):
        # Mirrors `kinexplorer gui --verbose`: the CLI sets DEBUG, then the window starts.
        get_logger(logging.DEBUG)
        with mock.patch.dict(os.environ, {"KINEXPLORER_LOG_LEVEL": "WARNING"}):
            logger = get_logger()
        self.assertEqual(logger.level, logging.DEBUG)

    def test_explicit_level_overrides(self):
        get_logger(logging.DEBUG)
        self.assertEqual(get_logger(logging.ERROR).level, logging.ERROR)

    def test_unknown_environment_level(self):
        with mock.patch.dict(os.environ, {"KINEXPLORER_LOG_LEVEL": "chatty"}):
            self.assertEqual(env_level(), logging.WARNING)


if __name__ == '__main__':
    unittest.main()
