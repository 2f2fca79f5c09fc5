"""
Tests for Logger Primitive

Covers the debug level, timestamps, context, and the stderr / file / stream targets.
"""

import io
import json
import re
import threading
from datetime import datetime, timezone

from utctime.primitives.logger import Logger


class TestLogger:
    """Test suite for Logger primitive"""

    def test_debug_logs_with_debug_level(self, capsys):
        """
        Logs DEBUG messages with DEBUG level
        """
        # Setup: Logger writing to stderr (default)
        logger = Logger()

        # Action: Log debug message
        logger.debug("test debug message")

        # Expected: JSON entry on stderr with level "debug"
        captured = capsys.readouterr()
        entry = json.loads(captured.err.strip())

        assert entry["event"] == "test debug message"
        assert entry["level"] == "debug"
        assert entry["logger"] == "utctime"

    def test_includes_iso8601_utc_timestamp(self):
        stream = io.StringIO()
        logger = Logger(stream=stream)
        before_time = datetime.now(timezone.utc)

        logger.debug("timestamp test")

        entry = json.loads(stream.getvalue())
        assert re.match(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?Z$", entry["timestamp"])
        parsed_time = datetime.fromisoformat(entry["timestamp"].replace("Z", "+00:00"))
        assert abs((parsed_time - before_time).total_seconds()) < 10

    def test_includes_context_in_output(self):
        stream = io.StringIO()
        logger = Logger(stream=stream)

        logger.debug("context test", context={"zone": "America/Chicago", "region": "central"})

        entry = json.loads(stream.getvalue())
        assert entry["zone"] == "America/Chicago"
        assert entry["region"] == "central"

    def test_stays_off_stdout(self, capsys):
        logger = Logger()

        logger.debug("stderr test")

        captured = capsys.readouterr()
        assert "stderr test" in captured.err
        assert "stderr test" not in captured.out

    def test_writes_to_file_when_configured(self, tmp_path):
        # Setup: nested path that does not exist yet
        log_file = tmp_path / "logs" / "utctime.log"

        # Action
        with Logger(output_file=str(log_file)) as logger:
            logger.debug("file test")

        # Expected: file created with a structured entry
        assert log_file.exists(), "Log file should be created"
        entry = json.loads(log_file.read_text(encoding="utf-8"))
        assert entry["event"] == "file test"
        assert entry["level"] == "debug"

    def test_close_is_idempotent(self, tmp_path):
        logger = Logger(output_file=str(tmp_path / "x.log"))

        logger.close()
        logger.close()

        assert logger._file_handle is None

    def test_thread_safe_logging(self, tmp_path):
        """
        Concurrent logging produces one intact JSON entry per message
        """
        log_file = tmp_path / "thread_test.log"
        num_threads = 10
        messages_per_thread = 50

        with Logger(output_file=str(log_file)) as logger:

            def log_messages(thread_id):
                for i in range(messages_per_thread):
                    logger.debug(f"thread-{thread_id}-message-{i}")

            threads = [
                threading.Thread(target=log_messages, args=(thread_id,))
                for thread_id in range(num_threads)
            ]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == num_threads * messages_per_thread
        events = {json.loads(line)["event"] for line in lines}
        assert "thread-9-message-49" in events
