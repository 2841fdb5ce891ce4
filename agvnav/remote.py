"""Remote-control handling: virtual pin writes mapped to vehicle commands."""

from __future__ import annotations

from typing import Callable, Dict

from agvnav.vehicle import Vehicle

PIN_FORWARD = 0
PIN_BACKWARD = 1
PIN_TURN_LEFT = 2
PIN_TURN_RIGHT = 3
PIN_SPEED = 4
PIN_FORWARD_10 = 8
PIN_LEFT_90 = 9
PIN_RIGHT_90 = 10

SPEED_BASE = 100
SPEED_STEP = 10


def _map_range(value: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Integer linear re-mapping of a value from one range onto another."""
    return (value - in_min) * (out_max - out_min) // (in_max - in_min) + out_min


class RemoteControl:
    """Applies values written to remote virtual pins to a vehicle.

    Writes to pins without a handler are ignored.
    """

    def __init__(self, vehicle: Vehicle) -> None:
        self.vehicle = vehicle
        self._handlers: Dict[int, Callable[[int], None]] = {
            PIN_FORWARD: self._drive(1, 1),
            PIN_BACKWARD: self._drive(-1, -1),
            PIN_TURN_LEFT: self._drive(-1, 1),
            PIN_TURN_RIGHT: self._drive(1, -1),
            PIN_SPEED: self._set_speed,
            PIN_FORWARD_10: self._flag("forward_10"),
            PIN_LEFT_90: self._flag("turn_left_90"),
            PIN_RIGHT_90: self._flag("turn_right_90"),
        }

    def handle(self, pin: int, value: int) -> None:
        """Process one write of ``value`` to virtual pin ``pin``."""
        handler = self._handlers.get(pin)
        if handler is not None:
            handler(int(value))

    def _drive(self, left_sign: int, right_sign: int) -> Callable[[int], None]:
        def handler(value: int) -> None:
            vehicle = self.vehicle
            if value:
                vehicle.left(left_sign * vehicle.speed)
                vehicle.right(right_sign * vehicle.speed)
            else:
                vehicle.stop()

        return handler

    def _set_speed(self, value: int) -> None:
        self.vehicle.speed = _map_range(value, 1, 10, 1, 10) * SPEED_STEP + SPEED_BASE
        print(f"Speed: {self.vehicle.speed}")

    def _flag(self, attribute: str) -> Callable[[int], None]:
        def handler(value: int) -> None:
            if value:
                setattr(self.vehicle, attribute, True)

        return handler