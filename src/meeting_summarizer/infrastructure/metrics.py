"""CSV timing metrics for summarization and distribution."""

import csv
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path

from meeting_summarizer.config import get_settings

HEADER = ["timestamp", "operation", "duration_ms", "input_chars", "outcome"]


class CSVLogger:
    """Thread-safe CSV logger for appending timing metrics."""

    def __init__(self, filepath: str | Path) -> None:
        """Initialize CSV logger.

        Args:
            filepath: Path to CSV file (will be created if doesn't exist)
        """
        self.filepath = Path(filepath)
        self._lock = threading.Lock()
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def _write_header_if_needed(self) -> None:
        if not self.filepath.exists() or self.filepath.stat().st_size == 0:
            with open(self.filepath, "w", newline="") as f:
                csv.writer(f).writerow(HEADER)

    def log(
        self,
        operation: str,
        duration_ms: float,
        input_chars: int = 0,
        outcome: str = "ok",
    ) -> None:
        """Log a timing metric to CSV.

        Args:
            operation: Name of the operation (e.g., "remote_summarize")
            duration_ms: Duration in milliseconds
            input_chars: Size of the processed input
            outcome: Short result label ("ok", "failed", ...)
        """
        with self._lock:
            self._write_header_if_needed()
            with open(self.filepath, "a", newline="") as f:
                csv.writer(f).writerow([
                    datetime.now(UTC).isoformat(),
                    operation,
                    f"{duration_ms:.2f}",
                    input_chars,
                    outcome,
                ])


@contextmanager
def timed(
    metrics: CSVLogger | None, operation: str, input_chars: int = 0
) -> Iterator[dict[str, str]]:
    """Time the enclosed block and log it when metrics are enabled.

    The yielded dict lets the block set ``outcome`` before it exits.
    """
    state = {"outcome": "ok"}
    start = time.perf_counter()
    try:
        yield state
    except Exception:
        state["outcome"] = "error"
        raise
    finally:
        if metrics is not None:
            duration_ms = (time.perf_counter() - start) * 1000
            metrics.log(operation, duration_ms, input_chars, state["outcome"])


_metrics_logger: CSVLogger | None = None


def get_metrics_logger() -> CSVLogger | None:
    """Get the shared metrics logger, or None when metrics are disabled."""
    global _metrics_logger
    path = get_settings().metrics_csv_path
    if not path:
        return None
    if _metrics_logger is None or _metrics_logger.filepath != Path(path):
        _metrics_logger = CSVLogger(path)
    return _metrics_logger
