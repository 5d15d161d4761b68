"""
Structured log setup, with optional rotating file output.
"""
import logging
import logging.handlers
import sys

from config import LOG_LEVEL, LOG_DIR, LOG_TO_FILE, LOG_FILE_MAX_BYTES, LOG_FILE_BACKUPS

HANDLER_NAMES = ("xgoals.console", "xgoals.file")


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    fmt = logging.Formatter(
        "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)-22s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Replace handlers from an earlier call instead of stacking them
    for h in list(root.handlers):
        if h.get_name() in HANDLER_NAMES:
            root.removeHandler(h)
            h.close()

    # ── Console handler ──────────────────────────────────────────────
    # stderr keeps stdout clean for --json output
    ch = logging.StreamHandler(sys.stderr)
    ch.set_name("xgoals.console")
    ch.setFormatter(fmt)
    root.addHandler(ch)

    # ── Rotating file handler ────────────────────────────────────────
    if LOG_TO_FILE:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            LOG_DIR / "xgoals.log",
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        fh.set_name("xgoals.file")
        fh.setFormatter(fmt)
        root.addHandler(fh)

    return root
