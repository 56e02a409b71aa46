"""Centralized logging configuration using Loguru with Pino-compatible output.

Usage:
    from refshift.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows if REFSHIFT_LOG_LEVEL=DEBUG

Environment Variables:
    REFSHIFT_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    REFSHIFT_LOG_JSON: 0|1 (default: 0, human-readable)
    REFSHIFT_LOG_FILE: path to log file (optional)
"""

import json
import os
import sys

from loguru import logger

# Remove default handler
logger.remove()

# Pino-compatible numeric levels
PINO_LEVELS = {
    "TRACE": 10,
    "DEBUG": 20,
    "INFO": 30,
    "WARNING": 40,
    "ERROR": 50,
    "CRITICAL": 60,
}

_log_level = os.environ.get("REFSHIFT_LOG_LEVEL", "INFO").upper()
_json_mode = os.environ.get("REFSHIFT_LOG_JSON", "0") == "1"
_log_file = os.environ.get("REFSHIFT_LOG_FILE")


def _pino_record(message) -> str:
    """Render a loguru message as one Pino-style NDJSON line."""
    record = message.record

    pino_log = {
        "level": PINO_LEVELS.get(record["level"].name, 30),
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
    }

    for key, value in record["extra"].items():
        pino_log[key] = value

    if record["exception"]:
        pino_log["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }

    return json.dumps(pino_log, default=str)


def pino_compatible_sink(message):
    """Write Pino-format NDJSON to stderr; stdout carries --print / --diff output."""
    # Never call logger.* inside a sink
    sys.stderr.write(_pino_record(message) + "\n")
    sys.stderr.flush()


def file_pino_sink(log_file: str):
    """Build a sink that appends Pino-format NDJSON to log_file."""

    def _sink(message):
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(_pino_record(message) + "\n")

    return _sink


# Human-readable format, also on stderr
_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

logger.level("DEBUG", color="<blue>")
logger.level("INFO", color="<white>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red>")

if _json_mode:
    logger.add(
        pino_compatible_sink,
        level=_log_level,
        colorize=False,
    )
else:
    logger.add(
        sys.stderr,
        level=_log_level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )

if _log_file:
    logger.add(
        file_pino_sink(_log_file),
        level="DEBUG",  # File always captures everything
    )


__all__ = [
    "logger",
    "PINO_LEVELS",
    "pino_compatible_sink",
    "file_pino_sink",
]
