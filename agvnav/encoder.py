"""Wheel encoder pulse counters."""

import threading


class Encoder:
    """Counts left and right wheel pulses while counting is enabled."""

    def __init__(self) -> None:
        self.counting = False
        self._left = 0
        self._right = 0
        self._lock = threading.Lock()

    def start(self) -> None:
        """Enable counting and clear both counters."""
        self.counting = True
        self.reset()

    def stop(self) -> None:
        """Disable counting; the counters keep their values."""
        self.counting = False

    def reset(self) -> None:
        with self._lock:
            self._left = 0
            self._right = 0

    def pulse_left(self) -> None:
        """Register a rising edge from the left wheel sensor."""
        if self.counting:
            with self._lock:
                self._left += 1

    def pulse_right(self) -> None:
        """Register a rising edge from the right wheel sensor."""
        if self.counting:
            with self._lock:
                self._right += 1

    def left(self) -> int:
        return self._left

    def right(self) -> int:
        return self._right