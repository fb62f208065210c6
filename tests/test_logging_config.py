"""Tests for logging setup."""

import io
import logging

from reqview.logging_config import log_level_for, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level_and_stream(self):
        """Test that records at the configured level reach the stream."""
        stream = io.StringIO()
        logger = setup_logging(level="DEBUG", format_string="%(levelname)s %(message)s", force=True, stream=stream)

        logging.getLogger("reqview.http.client").debug("sending")

        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert stream.getvalue() == "DEBUG sending\n"

    def test_records_below_level_dropped(self):
        """Test that lower-level records are filtered."""
        stream = io.StringIO()
        setup_logging(level="ERROR", force=True, stream=stream)

        logging.getLogger("reqview.render").warning("ignored")

        assert stream.getvalue() == ""

    def test_unknown_level_defaults_to_warning(self):
        """Test fallback for an unknown level name."""
        logger = setup_logging(level="chatty", force=True, stream=io.StringIO())
        assert logger.level == logging.WARNING

    def test_log_file(self, tmp_path):
        """Test logging to a file as well."""
        log_file = tmp_path / "reqview.log"
        setup_logging(level="INFO", log_file=str(log_file), force=True, stream=io.StringIO())

        logging.getLogger("reqview").info("to file")
        for handler in logging.getLogger("reqview").handlers:
            handler.flush()

        assert "to file" in log_file.read_text()

    def test_default_format(self):
        """Test that records carry level and logger name by default."""
        stream = io.StringIO()
        setup_logging(level="INFO", force=True, stream=stream)

        logging.getLogger("reqview.cli").info("ready")

        assert stream.getvalue() == "INFO reqview.cli: ready\n"

    def test_force_replaces_handlers(self):
        """Test that a forced second call leaves a single console handler."""
        first = io.StringIO()
        second = io.StringIO()
        setup_logging(level="INFO", force=True, stream=first)
        logger = setup_logging(level="INFO", force=True, stream=second)

        logger.info("once")

        assert len(logger.handlers) == 1
        assert first.getvalue() == ""
        assert "once" in second.getvalue()


class TestLogLevelFor:
    """Tests for mapping --verbose/--quiet to a level name."""

    def test_default(self):
        """Test the level with neither flag."""
        assert log_level_for() == "WARNING"

    def test_verbose(self):
        """Test that --verbose enables debug output."""
        assert log_level_for(verbose=True) == "DEBUG"

    def test_quiet(self):
        """Test that --quiet keeps only errors."""
        assert log_level_for(quiet=True) == "ERROR"

    def test_verbose_wins_over_quiet(self):
        """Test that --verbose takes precedence when both are given."""
        assert log_level_for(verbose=True, quiet=True) == "DEBUG"
