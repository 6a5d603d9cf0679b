from __future__ import annotations
import os
import sys
from typing import Tuple

UNKNOWN_FILE = "<unknown>"

def caller_location(depth: int = 1) -> Tuple[str, int]:
    """File base name and line number ``depth`` frames above the function calling this.

    ``depth=0`` is that function itself, ``depth=1`` its caller, and so on.
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:  # stack shallower than depth
        return UNKNOWN_FILE, 0
    return os.path.basename(frame.f_code.co_filename), frame.f_lineno
