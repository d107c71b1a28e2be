"""
debug_logger.py
---------------
Console diagnostics for the arena.

Each line is stamped with the time, the class (or module) that logged it
and a severity tag:

    [14:02:11] [GameManager][SYSTEM] Spawned bro-4821 at (312, 188)

Lines pass two filters: the category switch in LoggerConfig.CATEGORIES
and the LoggerConfig.LOG_LEVEL ceiling.
"""

import os
import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which subsystems may log, and how chatty they may be."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Startup and services
        "system": True,
        "loading": True,
        "display": True,
        "input": False,
        "debug_hud": True,

        # Arena
        "entity_spawn": True,
        "entity_cleanup": True,
        "movement": False,
        "wander": False,

        # Frame
        "render": True,
    }


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger shared by every arena module."""

    LINE_LENGTH = 59
    STATUS_COLUMN = 30

    LEVELS = {"ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

    # tag -> (color, severity)
    STYLES = {
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
        "FAIL": (Colors.RED, "ERROR"),
    }

    STATUS_COLORS = {"OK": Colors.GREEN, "FAIL": Colors.RED}

    # ===========================================================
    # Filtering
    # ===========================================================

    @staticmethod
    def enabled(category: str, severity: str = "INFO") -> bool:
        """True if a line of this category and severity would be printed."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        ceiling = DebugLogger.LEVELS.get(LoggerConfig.LOG_LEVEL, 3)
        return DebugLogger.LEVELS[severity] <= ceiling

    # ===========================================================
    # Formatting
    # ===========================================================

    @staticmethod
    def _source(depth: int = 3) -> str:
        """Name of the class (or module) that called the public log method."""
        try:
            frame = sys._getframe(depth)
        except ValueError:
            return "?"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__

        stem = os.path.splitext(os.path.basename(frame.f_code.co_filename))[0]
        return "".join(part.capitalize() for part in stem.split("_"))

    @staticmethod
    def _emit(tag: str, msg: str, category: str):
        color, severity = DebugLogger.STYLES[tag]
        if not DebugLogger.enabled(category, severity):
            return
        stamp = datetime.now().strftime("%H:%M:%S")
        print(f"{color}[{stamp}] [{DebugLogger._source()}][{tag}] {msg}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "movement"):
        """Per-frame detail; only shown at LOG_LEVEL VERBOSE."""
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._emit("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._emit("FAIL", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Banner separating startup from the running loop."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """One dotted status row per service brought up, e.g. '> DrawManager ..... [OK]'."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        label = f"> {module}".ljust(DebugLogger.STATUS_COLUMN)
        badge = f"[{status}]"
        dots = "." * max(DebugLogger.LINE_LENGTH - len(label) - len(badge) - 1, 1)
        color = DebugLogger.STATUS_COLORS.get(status.upper(), Colors.WHITE)
        print(f"{Colors.WHITE}{label}{dots} {color}{badge}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Indented detail under the last init_entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{'    ' * level}• {Colors.WHITE}{detail}{Colors.RESET}")
