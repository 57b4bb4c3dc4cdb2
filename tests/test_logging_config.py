"""
Tests for the logging configuration module.

This test suite validates:
- ProgressLogger for tracking batch progress in logs
- setup_logging configuration
- Context-aware logging
"""
import unittest
import logging
import os
import tempfile
from unittest.mock import MagicMock
from datetime import datetime, timedelta
from esperanto_analyzer.logging_config import (
    ProgressLogger,
    setup_logging,
    log_with_context
)


class TestProgressLogger(unittest.TestCase):
    """Test suite for the ProgressLogger class."""

    def setUp(self):
        """Set up a mock logger for testing."""
        self.mock_logger = MagicMock()

    def last_message(self):
        return self.mock_logger.info.call_args[0][0]

    def test_init_creates_progress_logger_with_defaults(self):
        """Tests that ProgressLogger initializes with correct defaults."""
        progress = ProgressLogger(total=100, desc="Paragraphs")

        self.assertEqual(progress.total, 100)
        self.assertEqual(progress.desc, "Paragraphs")
        self.assertEqual(progress.unit, "items")
        self.assertEqual(progress.step, 10)
        self.assertEqual(progress.current, 0)
        self.assertEqual(progress.percent, 0)
        self.assertIsNotNone(progress.start_time)

    def test_update_logs_at_step_intervals(self):
        """Tests that update() logs once per step of progress."""
        progress = ProgressLogger(total=100, logger=self.mock_logger)

        progress.update(5)  # 5%, below the first step
        self.assertEqual(self.mock_logger.info.call_count, 0)

        progress.update(10)  # 15%
        self.assertEqual(self.mock_logger.info.call_count, 1)

        progress.update(3)  # 18%, same step
        self.assertEqual(self.mock_logger.info.call_count, 1)

        progress.update(7)  # 25%
        self.assertEqual(self.mock_logger.info.call_count, 2)

    def test_custom_step(self):
        """Tests that a larger step logs less often."""
        progress = ProgressLogger(total=100, logger=self.mock_logger, step=50)

        progress.update(30)
        self.assertEqual(self.mock_logger.info.call_count, 0)
        progress.update(30)
        self.assertEqual(self.mock_logger.info.call_count, 1)

    def test_update_logs_when_item_description_provided(self):
        """Tests that update() logs immediately when an item description is provided."""
        progress = ProgressLogger(total=100, logger=self.mock_logger)

        progress.update(1, item_desc="chapter 1")

        self.assertEqual(self.mock_logger.info.call_count, 1)
        self.assertIn("- chapter 1", self.last_message())

    def test_update_message_carries_counts_and_unit(self):
        """Tests that the log message carries counts, unit and percentage."""
        progress = ProgressLogger(total=100, desc="Analyzing", logger=self.mock_logger,
                                  unit="paragraphs")

        progress.update(25)

        self.assertIn("Analyzing: 25/100 paragraphs (25%)", self.last_message())

    def test_update_calculates_eta(self):
        """Tests that update() logs an ETA while incomplete."""
        progress = ProgressLogger(total=100, logger=self.mock_logger)
        progress.start_time = datetime.now() - timedelta(seconds=10)

        progress.update(50)

        self.assertIn("[ETA: 10s]", self.last_message())

    def test_update_no_eta_when_complete(self):
        """Tests that no ETA is shown once complete."""
        progress = ProgressLogger(total=100, logger=self.mock_logger)
        progress.start_time = datetime.now() - timedelta(seconds=10)

        progress.update(100)

        self.assertNotIn("ETA:", self.last_message())
        self.assertIsNone(progress.eta())

    def test_update_handles_zero_total(self):
        """Tests that a zero total does not divide by zero."""
        progress = ProgressLogger(total=0, logger=self.mock_logger)

        progress.update(1, item_desc="empty file")

        self.assertIn("(0%)", self.last_message())

    def test_percent_is_capped(self):
        progress = ProgressLogger(total=10, logger=self.mock_logger)
        progress.update(15)
        self.assertEqual(progress.percent, 100)

    def test_close_logs_finished_line(self):
        """Tests that close() completes the count and logs a closing line."""
        progress = ProgressLogger(total=100, desc="Analyzing", logger=self.mock_logger,
                                  unit="paragraphs")

        progress.update(50)
        progress.close()

        self.assertEqual(progress.current, 100)
        self.assertIn("Analyzing finished: 100 paragraphs in", self.last_message())

    def test_close_with_summary(self):
        """Tests that the summary dict is appended as key=value pairs."""
        progress = ProgressLogger(total=2, logger=self.mock_logger)

        progress.update(2)
        progress.close(summary={"sentences": 5, "coverage": "80.0%"})

        self.assertTrue(self.last_message().endswith("(sentences=5, coverage=80.0%)"))

    def test_close_logs_once(self):
        """Tests that close() adds exactly one line after a complete run."""
        progress = ProgressLogger(total=100, logger=self.mock_logger)

        progress.update(100)
        call_count_before = self.mock_logger.info.call_count
        progress.close()

        self.assertEqual(self.mock_logger.info.call_count, call_count_before + 1)


class TestSetupLogging(unittest.TestCase):
    """Test suite for the setup_logging() function."""

    def setUp(self):
        """Clear root logger handlers before each test."""
        root_logger = logging.getLogger()
        self.saved_level = root_logger.level
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

    def tearDown(self):
        """Clean up handlers after each test."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
        root_logger.setLevel(self.saved_level)

    def _temp_log_file(self):
        with tempfile.NamedTemporaryFile(delete=False, suffix='.log') as tmp_file:
            log_file = tmp_file.name
        self.addCleanup(lambda: os.path.exists(log_file) and os.remove(log_file))
        return log_file

    def test_console_only_by_default(self):
        """Tests that without a log file only a console handler is installed."""
        setup_logging()

        handlers = logging.getLogger().handlers
        self.assertEqual(len(handlers), 1)
        self.assertNotIsInstance(handlers[0], logging.FileHandler)

    def test_creates_file_handler(self):
        """Tests that a log file adds a file handler next to the console one."""
        setup_logging(log_file=self._temp_log_file())

        handlers = logging.getLogger().handlers
        file_handlers = [h for h in handlers if isinstance(h, logging.FileHandler)]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(len(handlers), 2)

    def test_sets_info_level_by_default(self):
        """Tests that setup_logging sets INFO level by default."""
        setup_logging()
        self.assertEqual(logging.getLogger().level, logging.INFO)

    def test_respects_explicit_level(self):
        """Tests that an explicit level is applied."""
        setup_logging(level=logging.WARNING)
        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_sets_debug_level_when_debug_true(self):
        """Tests that debug=True overrides the level."""
        setup_logging(level=logging.WARNING, debug=True)
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_uses_enhanced_format_in_debug_mode(self):
        """Tests that debug mode adds file and line to the format."""
        setup_logging(log_file=self._temp_log_file(), debug=True)

        for handler in logging.getLogger().handlers:
            self.assertIn("%(filename)s", handler.formatter._fmt)
            self.assertIn("%(lineno)d", handler.formatter._fmt)

    def test_uses_simple_format_in_normal_mode(self):
        """Tests that normal mode leaves file and line out."""
        setup_logging(debug=False)

        for handler in logging.getLogger().handlers:
            self.assertNotIn("%(filename)s", handler.formatter._fmt)

    def test_writes_run_separator_in_debug_mode(self):
        """Tests that a run separator is written to the log file in debug mode."""
        log_file = self._temp_log_file()
        setup_logging(log_file=log_file, debug=True)

        for handler in logging.getLogger().handlers:
            handler.flush()
        with open(log_file, 'r', encoding='utf-8') as f:
            log_content = f.read()

        self.assertIn("=" * 80, log_content)
        self.assertIn("NEW RUN STARTED", log_content)

    def test_clears_existing_handlers(self):
        """Tests that setup_logging replaces existing handlers instead of stacking."""
        logging.getLogger().addHandler(logging.StreamHandler())

        setup_logging()
        setup_logging()

        self.assertEqual(len(logging.getLogger().handlers), 1)


class TestLogWithContext(unittest.TestCase):
    """Test suite for log_with_context()."""

    def setUp(self):
        self.mock_logger = MagicMock()

    def test_logs_main_message_at_given_level(self):
        """Tests that the main message is logged at the requested level."""
        self.mock_logger.isEnabledFor.return_value = False

        log_with_context("Sentence analyzed", {"tokens": 3}, level=logging.INFO,
                         logger=self.mock_logger)

        self.mock_logger.log.assert_called_once_with(logging.INFO, "Sentence analyzed")
        self.mock_logger.debug.assert_not_called()

    def test_logs_context_when_debug_enabled(self):
        """Tests that each context entry gets its own debug line."""
        self.mock_logger.isEnabledFor.return_value = True

        log_with_context("Sentence analyzed", {"sentence": "Mi amas vin.", "tokens": 3},
                         logger=self.mock_logger)

        lines = [c[0][0] for c in self.mock_logger.debug.call_args_list]
        self.assertEqual(len(lines), 2)
        self.assertIn("sentence: Mi amas vin.", lines[0])
        self.assertIn("tokens: 3", lines[1])

    def test_truncates_long_values(self):
        """Tests that long context values are truncated."""
        self.mock_logger.isEnabledFor.return_value = True

        log_with_context("Long", {"text": "a" * 500}, logger=self.mock_logger)

        line = self.mock_logger.debug.call_args[0][0]
        self.assertTrue(line.endswith("..."))
        self.assertLess(len(line), 250)


if __name__ == '__main__':
    unittest.main()
