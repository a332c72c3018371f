import logging
import sys
from dataclasses import dataclass

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


@dataclass
class QueueConfig:
    """Construction parameters for a BucketQueue."""
    capacity: int = 1           # C, largest key increment over the minimum
    initial_arena: int = 64     # item records allocated up front
    log_level: str = "WARNING"

    def __post_init__(self):
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise TypeError(f"capacity must be an int, got {self.capacity!r}")
        if self.capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {self.capacity}")
        if self.initial_arena < 1:
            raise ValueError(f"initial_arena must be positive, got {self.initial_arena}")
        if not isinstance(self.log_level, str):
            raise TypeError(f"log_level must be a str, got {self.log_level!r}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level {self.log_level!r}")

    def __repr__(self):
        return f"Capacity: {self.capacity}\n" \
                f"Initial Arena: {self.initial_arena}\n" \
                f"Log Level: {self.log_level}\n"


def configure_logging(level="INFO"):
    """Attach a stdout handler to the package logger (once) and set its level."""
    logger = logging.getLogger("bucket_queue")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(getattr(h, "_bucket_queue", False) for h in logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._bucket_queue = True
        logger.addHandler(console_handler)
    return logger
