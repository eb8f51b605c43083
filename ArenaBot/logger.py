"""
ArenaBot Logger - Persistent file-based logging.

Provides structured, levelled logging to rotating log files so a match can
be reviewed tick by tick after it ends; the arena console only keeps the
last few hundred lines.

Usage
-----
    from ArenaBot.logger import get_logger

    log = get_logger()          # module-level logger
    log.info("Arena started")
    log.debug("Chain state: %s", chain)
    log.warning("Miner %s has no valid source", unit_id, tick=42)

    # Game-specific helpers
    log.game_event("SPAWN", "miner t1 (cost 250)", tick=120)
    log.job("fighter", unit_id="c17", decision="engage c3", tick=120)
    log.strength(comparison, tick=150)

The log file lives at  logs/arenabot_<timestamp>.log  under the working
directory. Old log files are kept for up to LOG_BACKUP_COUNT runs.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


# ── Configuration ────────────────────────────────────────────────────────────

LOG_DIR          = Path("logs")          # Relative to CWD
LOG_LEVEL        = logging.DEBUG         # File log level  (very verbose)
CONSOLE_LEVEL    = logging.INFO          # Console level   (INFO and above)
LOG_BACKUP_COUNT = 10                    # How many old log files to keep
MAX_BYTES        = 5 * 1024 * 1024       # 5 MB per file before rotating


# ── Custom log levels ─────────────────────────────────────────────────────────

GAME_EVENT_LEVEL = 25   # between INFO (20) and WARNING (30)
JOB_LEVEL        = 15   # between DEBUG (10) and INFO (20)

logging.addLevelName(GAME_EVENT_LEVEL, "GAME")
logging.addLevelName(JOB_LEVEL,        "JOB")


# ── Custom formatter ──────────────────────────────────────────────────────────

class ArenaFormatter(logging.Formatter):
    """
    Adds a [tick] column when a 'tick' extra field is present, so log lines
    can be correlated directly to a specific simulation step.

    Example output:
        2026-10-19 21:14:03.412 | INFO    |       - | Arena started
        2026-10-19 21:14:05.001 | GAME    |     120 | SPAWN | miner t1 (cost 250, energy 300)
        2026-10-19 21:14:05.002 | JOB     |     120 | fighter | id=c17 engage c3
    """

    BASE_FMT = "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(tick_col)7s | %(message)s"
    DATE_FMT = "%Y-%m-%d %H:%M:%S"

    def format(self, record: logging.LogRecord) -> str:
        tick = getattr(record, "tick", None)
        record.tick_col = "-" if tick is None else str(tick)
        record.levelname = record.levelname[:7]
        return super().format(record)


# ── Logger factory ────────────────────────────────────────────────────────────

_logger_instance: Optional["ArenaLogger"] = None


def get_logger(name: str = "arenabot") -> "ArenaLogger":
    """
    Return the singleton ArenaLogger, creating it on first call.

    Call this once at module level in each file that needs logging:

        log = get_logger()
    """
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = ArenaLogger(name)
    return _logger_instance


class ArenaLogger:
    """
    Thin wrapper around Python's standard logging that adds arena-specific
    helpers and wires up both a rotating file handler and a console handler.
    """

    def __init__(self, name: str = "arenabot") -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(LOG_LEVEL)

        if self._logger.handlers:
            return

        self._setup_handlers()

    # ── Setup ─────────────────────────────────────────────────────────────────

    def _setup_handlers(self) -> None:
        LOG_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file  = LOG_DIR / f"arenabot_{timestamp}.log"

        formatter = ArenaFormatter(
            fmt     = ArenaFormatter.BASE_FMT,
            datefmt = ArenaFormatter.DATE_FMT,
        )

        # ── Rotating file handler ──────────────────────────────────────────
        file_handler = logging.handlers.RotatingFileHandler(
            filename    = log_file,
            maxBytes    = MAX_BYTES,
            backupCount = LOG_BACKUP_COUNT,
            encoding    = "utf-8",
        )
        file_handler.setLevel(LOG_LEVEL)
        file_handler.setFormatter(formatter)

        # ── Console handler ────────────────────────────────────────────────
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(CONSOLE_LEVEL)
        console_handler.setFormatter(formatter)

        self._logger.addHandler(file_handler)
        self._logger.addHandler(console_handler)

        self._logger.info(
            "Logger initialised, writing to %s",
            log_file.resolve(),
        )

    # ── Standard log levels ───────────────────────────────────────────────────

    def debug(self, msg: str, *args, tick: Optional[int] = None, **kwargs) -> None:
        self._logger.debug(msg, *args, extra={"tick": tick}, **kwargs)

    def info(self, msg: str, *args, tick: Optional[int] = None, **kwargs) -> None:
        self._logger.info(msg, *args, extra={"tick": tick}, **kwargs)

    def warning(self, msg: str, *args, tick: Optional[int] = None, **kwargs) -> None:
        self._logger.warning(msg, *args, extra={"tick": tick}, **kwargs)

    def error(self, msg: str, *args, tick: Optional[int] = None, **kwargs) -> None:
        self._logger.error(msg, *args, extra={"tick": tick}, **kwargs)

    def exception(self, msg: str, *args, tick: Optional[int] = None, **kwargs) -> None:
        self._logger.exception(msg, *args, extra={"tick": tick}, **kwargs)

    # ── Arena-specific helpers ────────────────────────────────────────────────

    def game_event(
        self,
        event_type: str,
        detail: str,
        tick: Optional[int] = None,
    ) -> None:
        """
        Log a significant named event (spawns, deaths, stage changes, alerts).

        Example:
            log.game_event("SPAWN", "archer t1 (cost 200)", tick=310)
            log.game_event("DIED", "hauler c12", tick=402)
        """
        self._logger.log(
            GAME_EVENT_LEVEL,
            "%s | %s",
            event_type.upper(),
            detail,
            extra={"tick": tick},
        )

    def job(
        self,
        job_name: str,
        unit_id: str,
        decision: str,
        tick: Optional[int] = None,
    ) -> None:
        """
        Log one unit's decision for this tick.

        Example:
            log.job("archer", unit_id="c21", decision="kite -> (44, 51)", tick=512)
        """
        self._logger.log(
            JOB_LEVEL,
            "%s | id=%s %s",
            job_name,
            unit_id,
            decision,
            extra={"tick": tick},
        )

    def strength(self, comparison, tick: Optional[int] = None) -> None:
        """
        Log a team strength comparison at DEBUG level.

        Called periodically by the host loop, not every tick.
        """
        self._logger.debug(
            "Strength | own=%.1f (%d) enemy=%.1f (%d) ratio=%.2f %s",
            getattr(comparison, "my_strength", 0.0),
            getattr(comparison, "my_count", 0),
            getattr(comparison, "enemy_strength", 0.0),
            getattr(comparison, "enemy_count", 0),
            getattr(comparison, "ratio", 0.0),
            getattr(comparison, "assessment", "?"),
            extra={"tick": tick},
        )
