import logging
import sys
from datetime import datetime


class ProgressLogger:
    """
    Progress reporting through the logging system.

    Used by batch analysis runs where a progress bar would end up garbled
    in log files. Logs every `step` percent, on demand for a named item,
    and once more when the run is closed, optionally with a summary of
    what the run produced.
    """
    def __init__(self, total, desc="Progress", logger=None, unit="items", step=10):
        self.total = total
        self.current = 0
        self.desc = desc
        self.unit = unit
        self.step = step
        self.logger = logger or logging.getLogger()
        self.start_time = datetime.now()
        self.last_log_percent = -1

    @property
    def percent(self) -> int:
        if self.total <= 0:
            return 0
        return min(int(self.current * 100 / self.total), 100)

    def elapsed(self) -> float:
        return (datetime.now() - self.start_time).total_seconds()

    def eta(self):
        """Seconds left at the current rate, or None when unknown or done."""
        elapsed = self.elapsed()
        if self.current <= 0 or self.current >= self.total or elapsed <= 0:
            return None
        rate = self.current / elapsed
        return int((self.total - self.current) / rate)

    def update(self, n=1, item_desc=None):
        """Advance by n items; item_desc forces a log line naming the item."""
        self.current += n
        percent = self.percent

        due = percent - self.last_log_percent >= self.step or self.current == self.total
        if not (due or item_desc):
            return

        message = f"{self.desc}: {self.current}/{self.total} {self.unit} ({percent}%)"
        if item_desc:
            message += f" - {item_desc}"
        eta = self.eta()
        if eta:
            message += f" [ETA: {eta}s]"

        self.logger.info(message)
        self.last_log_percent = percent

    def close(self, summary=None):
        """
        Finish the run with one closing line.

        Args:
            summary: Optional dict of run results, logged as key=value pairs
        """
        self.current = max(self.current, self.total)
        message = f"{self.desc} finished: {self.current} {self.unit} in {self.elapsed():.1f}s"
        if summary:
            message += " (" + ", ".join(f"{key}={value}" for key, value in summary.items()) + ")"
        self.logger.info(message)


def setup_logging(log_file=None, level=logging.INFO, debug=False):
    """
    Set up logging for the command-line tools.

    The library itself never installs handlers; only entry points call this.

    Args:
        log_file: Optional path to a log file (appended to). Console only if None.
        level: Logging level (default: INFO).
        debug: If True, enables DEBUG level with file/line context.
    """
    # Clear existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG
        format_string = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    else:
        format_string = '%(asctime)s - %(levelname)s - %(message)s'

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(format_string))
        root_logger.addHandler(handler)

    root_logger.setLevel(level)

    # Run separator
    logging.debug("=" * 80)
    logging.debug(f"NEW RUN STARTED - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    if debug:
        logging.debug("DEBUG MODE ENABLED - Verbose logging active")
    logging.debug("=" * 80)


def log_with_context(message, context=None, level=logging.DEBUG, logger=None):
    """
    Log a message with additional context (inputs, state, etc.).

    Args:
        message: Main log message
        context: Dict of contextual information
        level: Log level (default: DEBUG)
        logger: Logger to use (default: root logger)
    """
    logger = logger or logging.getLogger()
    logger.log(level, message)

    if context and logger.isEnabledFor(logging.DEBUG):
        for key, value in context.items():
            # Truncate long values
            str_value = str(value)
            if len(str_value) > 200:
                str_value = str_value[:200] + "..."
            logger.debug(f"  └─ {key}: {str_value}")
