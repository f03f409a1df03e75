import logging
import os

logger = logging.getLogger("styleruns")
trace_logger = logging.getLogger("styleruns.trace")

DEFAULT_LOG_LEVEL = "WARNING"

# Create a custom logging level
DETAIL = 15
logging.addLevelName(DETAIL, "DETAIL")


# Create a custom log method for the "DETAIL" level
def detail(self, message, *args, **kws):
    if self.isEnabledFor(DETAIL):
        self._log(DETAIL, message, args, **kws)


# Add the custom log method to the logging.Logger class
logging.Logger.detail = detail  # type: ignore


def get_logger() -> logging.Logger:
    """The package logger, its level set from the `LOG_LEVEL` environment variable."""
    level_name = os.environ.get("LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(level_name)
    # -- an unknown name comes back as the string "Level <name>" --
    logger.setLevel(level if isinstance(level, int) else getattr(logging, DEFAULT_LOG_LEVEL))
    return logger
