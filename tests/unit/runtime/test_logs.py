"""Tests for file logging setup."""

from __future__ import annotations

import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirpanes.runtime.logs import LOG_DIR_ENV, LOG_LEVEL_ENV, configure_logging, get_logger


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        logger = get_logger()
        saved_handlers = list(logger.handlers)
        saved_level = logger.level
        for handler in saved_handlers:
            logger.removeHandler(handler)

        def restore() -> None:
            self._drop_handlers()
            for handler in saved_handlers:
                logger.addHandler(handler)
            logger.setLevel(saved_level)

        self.addCleanup(restore)
        environ = {key: value for key, value in os.environ.items() if key not in (LOG_DIR_ENV, LOG_LEVEL_ENV)}
        patcher = mock.patch.dict(os.environ, environ, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)

    @staticmethod
    def _drop_handlers() -> None:
        logger = get_logger()
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    def test_without_level_logging_is_disabled(self) -> None:
        self.assertIsNone(configure_logging())
        handlers = get_logger().handlers
        self.assertEqual(len(handlers), 1)
        self.assertIsInstance(handlers[0], logging.NullHandler)

    def test_level_writes_package_records_to_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = configure_logging("debug", log_dir=Path(tmp))
            logging.getLogger("dirpanes.pane.context").debug("moved to %s", "/srv")
            for handler in get_logger().handlers:
                handler.flush()

            self.assertEqual(log_path, Path(tmp) / "dirpanes.log")
            self.assertIn("moved to /srv", log_path.read_text(encoding="utf-8"))
            self.assertEqual(get_logger().level, logging.DEBUG)
            self._drop_handlers()

    def test_environment_supplies_level_and_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            os.environ[LOG_LEVEL_ENV] = "warning"
            os.environ[LOG_DIR_ENV] = tmp

            log_path = configure_logging()

            self.assertEqual(log_path, Path(tmp) / "dirpanes.log")
            self.assertEqual(get_logger().level, logging.WARNING)
            self._drop_handlers()

    def test_reconfiguring_replaces_previous_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging("info", log_dir=Path(tmp))
            configure_logging("info", log_dir=Path(tmp), filename="second.log")

            handlers = get_logger().handlers
            self.assertEqual(len(handlers), 1)
            self.assertTrue(handlers[0].baseFilename.endswith("second.log"))
            self._drop_handlers()


if __name__ == "__main__":
    unittest.main()
