"""
Session logging for analysis runs.

A session writes everything (including per-rule DEBUG diagnostics from the
inspection context) to {log_dir}/{context_name}.log and mirrors INFO and above
to stderr, so reports printed to stdout stay clean for piping.

Context-specific prefix wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from loguru import logger

from sift import __version__
from sift.utils.timestamp import now, now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

PROVENANCE_RULE = "=" * 80


def new_session_dir(prefix: str = "analyze", logs_root: Optional[Path] = None) -> Path:
    """
    Timestamped session directory path, e.g. outs/logs/analyze_20251114_123456.

    The directory is not created; setup_logger() does that.
    """
    return (logs_root or LOGS_PATH) / f"{prefix}_{now()}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict] = None,
    console_level: str = "INFO",
    level_colors: Optional[Dict[str, str]] = None,
) -> Path:
    """
    Replace all loguru sinks with a session file sink and a stderr sink.

    Also re-enables the "sift" loggers, which the package disables on import.

    Args:
        context_name: Log file stem (e.g., "analyze")
        log_dir: Session directory, created if missing
        extra_provenance: Run details for the provenance header (input files, etc.)
        console_level: Minimum level mirrored to stderr
        level_colors: Overrides for LEVEL_COLORS (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to the session log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)
    logger.enable("sift")

    log_provenance(extra_provenance)
    return log_file


def provenance_lines(extra_context: Optional[Dict] = None) -> List[str]:
    """Key: value lines describing how and where this run was started."""
    lines = [
        f"SIFT: {__version__}",
        f"Started: {now_exact()}",
        f"Script: {sys.argv[0]}",
        f"Command: {' '.join(sys.argv)}",
        f"Working directory: {Path.cwd()}",
        f"Python: {sys.version.split()[0]}",
    ]
    lines.extend(f"{key}: {value}" for key, value in (extra_context or {}).items())
    return lines


def log_provenance(extra_context: Optional[Dict] = None) -> None:
    """Log the provenance header between two rules at INFO level."""
    logger.info(PROVENANCE_RULE)
    for line in provenance_lines(extra_context):
        logger.info(line)
    logger.info(PROVENANCE_RULE)
