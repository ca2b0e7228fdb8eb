from __future__ import annotations
import logging, platform, subprocess
from typing import Optional

logger = logging.getLogger(__name__)

CLEAR_CMDS = {
    "Linux": ["clear"],
    "Darwin": ["clear"],
    "Windows": ["cmd", "/c", "cls"],
}

def clear_screen(timeout: Optional[float] = None, system: Optional[str] = None) -> bool:
    """Best effort; returns False when the screen was not cleared."""
    system = system or platform.system()
    cmd = CLEAR_CMDS.get(system)
    if not cmd:
        logger.info("clearing the screen is not supported on %s", system)
        return False
    try:
        subprocess.run(cmd, check=True, timeout=timeout)
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("error clearing the screen: %s", e)
        return False
    return True
