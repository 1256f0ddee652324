"""
scheduler.py: Display-refresh callback scheduling with cancellable handles.
"""

from typing import Callable, Dict, List


class FrameScheduler:
    """
    Callbacks requested now run on the next call to `run_pending`, once.
    A callback that requests another frame while running is deferred to the
    following `run_pending`, so every frame advances at most one step.
    """

    def __init__(self):
        self._next_handle = 1
        self._callbacks: Dict[int, Callable[[], None]] = {}

    def request(self, callback: Callable[[], None]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._callbacks[handle] = callback
        return handle

    def cancel(self, handle: int):
        """Cancelling an unknown or already-run handle is a no-op."""
        self._callbacks.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._callbacks)

    def run_pending(self) -> int:
        """Runs the callbacks queued before this frame. Returns how many ran."""
        due: List[int] = sorted(self._callbacks)
        ran = 0
        for handle in due:
            # An earlier callback this frame may have cancelled it
            callback = self._callbacks.pop(handle, None)
            if callback is None:
                continue
            callback()
            ran += 1
        return ran

    def clear(self):
        self._callbacks.clear()
