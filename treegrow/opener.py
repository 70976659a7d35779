"""Launch helper that hands a folder to the desktop's default application.

Returns an error message string instead of raising for UI-friendly handling.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def launcher_command(target: Path, platform: str | None = None) -> list[str] | None:
    """Return the argv used to open ``target``, or ``None`` on Windows."""
    platform = sys.platform if platform is None else platform
    if platform == "win32":
        return None
    if platform == "darwin":
        return ["open", str(target)]
    return ["xdg-open", str(target)]


def open_in_application(target: Path) -> str | None:
    cmd = launcher_command(target)
    try:
        if cmd is None:
            os.startfile(str(target))  # type: ignore[attr-defined]
        else:
            subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
    except FileNotFoundError:
        logger.warning("no application launcher available for %s", target)
        return "Cannot open: no application launcher found."
    except OSError as exc:
        logger.warning("failed to open %s: %s", target, exc)
        return f"Failed to open {target.name or target}: {exc}"
    logger.info("opened %s", target)
    return None
