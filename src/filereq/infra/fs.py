from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrapper over 'os' for the existence probes performed during a check.
Unlike os.path.exists, the probe distinguishes "not there" from "could not
tell" (permission denied, I/O error).
"""

import logging
import os
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def probe_path(path: str) -> Tuple[bool, Optional[str]]:
    """
    Check whether a path exists, following symlinks.

    A dangling symlink counts as missing. Any entry type (file, directory,
    socket) counts as present.

    Args:
        path: Path to probe.

    Returns:
        Tuple[bool, Optional[str]]: (Exists flag, Error message if the probe
                                    itself failed).
    """
    try:
        os.stat(path)
        return True, None
    except (FileNotFoundError, NotADirectoryError):
        return False, None
    except OSError as e:
        logger.warning(f"Could not probe '{path}': {e}")
        return False, e.strerror or str(e)
    except ValueError as e:
        # Embedded NUL bytes and similar malformed paths
        logger.warning(f"Could not probe '{path}': {e}")
        return False, str(e)
