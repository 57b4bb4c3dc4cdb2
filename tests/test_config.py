"""
Tests for environment-driven configuration.
"""
import logging
import os
import unittest
from unittest.mock import patch

from esperanto_analyzer import config


class TestLogLevel(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_default_when_unset(self):
        self.assertEqual(config.get_log_level(), logging.INFO)
        self.assertEqual(config.get_log_level(logging.WARNING), logging.WARNING)

    @patch.dict(os.environ, {config.ENV_LOG_LEVEL: "debug"})
    def test_level_name(self):
        self.assertEqual(config.get_log_level(), logging.DEBUG)

    @patch.dict(os.environ, {config.ENV_LOG_LEVEL: "LOUD"})
    def test_unknown_level(self):
        """Tests that an unknown level name falls back with a warning."""
        with self.assertLogs('esperanto_analyzer.config', level='WARNING'):
            self.assertEqual(config.get_log_level(logging.ERROR), logging.ERROR)


class TestLogFile(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_unset(self):
        self.assertIsNone(config.get_log_file())

    @patch.dict(os.environ, {config.ENV_LOG_FILE: "  "})
    def test_blank(self):
        self.assertIsNone(config.get_log_file())

    @patch.dict(os.environ, {config.ENV_LOG_FILE: "/tmp/analyzer.log"})
    def test_path(self):
        self.assertEqual(config.get_log_file(), "/tmp/analyzer.log")


class TestThreshold(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_default(self):
        self.assertEqual(config.get_default_threshold(), config.DEFAULT_VALIDITY_THRESHOLD)

    @patch.dict(os.environ, {config.ENV_THRESHOLD: "0.6"})
    def test_override(self):
        self.assertAlmostEqual(config.get_default_threshold(), 0.6)

    @patch.dict(os.environ, {config.ENV_THRESHOLD: "most"})
    def test_non_numeric(self):
        with self.assertLogs('esperanto_analyzer.config', level='WARNING'):
            self.assertEqual(config.get_default_threshold(), 0.8)

    @patch.dict(os.environ, {config.ENV_THRESHOLD: "1.5"})
    def test_out_of_range(self):
        with self.assertLogs('esperanto_analyzer.config', level='WARNING'):
            self.assertEqual(config.get_default_threshold(), 0.8)


if __name__ == '__main__':
    unittest.main()
