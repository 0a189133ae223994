"""
Utility functions for long running graph algorithms.
"""

import gc
import logging
import os
import time
from typing import Optional

import psutil

from .exceptions import MemoryLimitExceeded

logger = logging.getLogger(__name__)

# Seconds between two resident memory samples
MEMORY_CHECK_INTERVAL = 0.1


class MemoryManager:
    """Memory ceiling enforcement for graph algorithms."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        # Only sample the process when a ceiling is enforced
        self.start_memory = get_memory_usage() if self.max_memory else 0
        self._peak_memory = self.start_memory
        self._last_check = 0.0
        self._check_interval = MEMORY_CHECK_INTERVAL

    @property
    def enabled(self) -> bool:
        return self.max_memory is not None

    def check_memory(self) -> None:
        """Check if memory growth since start exceeds the limit."""
        if not self.max_memory:
            return

        current_time = time.monotonic()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.debug("Memory ceiling crossed at %s bytes", current)
                raise MemoryLimitExceeded(
                    f"Memory usage {(current - self.start_memory)/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
