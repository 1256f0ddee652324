"""
device.py: Decides whether the host is touch-primary, for on-screen copy only.
"""

import logging
import os
from typing import Mapping, Optional

from .constants import MOBILE_BREAKPOINT

logger = logging.getLogger(__name__)

IS_ANDROID = 'ANDROID_ARGUMENT' in os.environ or 'ANDROID_PRIVATE' in os.environ


def is_touch_primary(window_width: int, override: Optional[bool] = None,
                     environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    An explicit override wins; otherwise Android hosts and narrow windows
    (at or below the mobile breakpoint) count as touch-primary.
    """
    if override is not None:
        return override
    if environ is None:
        android = IS_ANDROID
    else:
        android = 'ANDROID_ARGUMENT' in environ or 'ANDROID_PRIVATE' in environ
    return android or window_width <= MOBILE_BREAKPOINT


class TouchDetector:
    """Keeps the touch-primary flag current as the window is resized."""

    def __init__(self, window_width: int, override: Optional[bool] = None):
        self.override = override
        self.touch_primary = is_touch_primary(window_width, override)

    def on_resize(self, window_width: int) -> bool:
        touch = is_touch_primary(window_width, self.override)
        if touch != self.touch_primary:
            logger.info("Touch-primary is now %s (window width %d)", touch, window_width)
        self.touch_primary = touch
        return touch
