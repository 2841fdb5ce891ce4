"""Differential-drive vehicle: motor outputs, step planning and marker alignment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Sequence

from agvnav.astar import AStar, Node
from agvnav.encoder import Encoder
from agvnav.qrlink import QrData, QrLink

DEFAULT_SPEED = 120
PWM_MAX = 255
FRAME_CENTER = 320


class Action(IntEnum):
    IDLE = 0
    FWD = 1
    BACK = 2
    LEFT = 3
    RIGHT = 4


class Direction(IntEnum):
    POS_X = 0
    NEG_X = 1
    POS_Y = 2
    NEG_Y = 3


class CtrlState(IntEnum):
    START = 0
    RUN_STEP = 1
    DONE_STEP = 2
    ALIGN_QR = 3
    DONE_QR = 4
    STOP = 5


@dataclass(frozen=True)
class Step:
    """A movement to a marker: the action to take and the resulting heading."""

    node_id: int
    action: Action
    direction: Direction


@dataclass
class MotorChannel:
    """Output state of one motor driver: direction pin level and PWM duty."""

    direction_high: bool = False
    duty: int = 0


# Rules applied in order for every move; the heading they test is the one
# left by earlier rules, so a single move may emit more than one step.
_STEP_RULES = (
    ("y", 1, Direction.POS_Y, Action.FWD, Direction.POS_Y),
    ("y", -1, Direction.POS_Y, Action.BACK, Direction.NEG_Y),
    ("x", 1, Direction.POS_Y, Action.LEFT, Direction.POS_X),
    ("x", -1, Direction.POS_Y, Action.RIGHT, Direction.NEG_X),
    ("y", 1, Direction.NEG_Y, Action.BACK, Direction.NEG_Y),
    ("y", -1, Direction.NEG_Y, Action.FWD, Direction.POS_Y),
    ("x", 1, Direction.NEG_Y, Action.RIGHT, Direction.POS_X),
    ("x", -1, Direction.NEG_Y, Action.LEFT, Direction.NEG_X),
    ("y", 1, Direction.POS_X, Action.RIGHT, Direction.POS_Y),
    ("y", -1, Direction.POS_X, Action.LEFT, Direction.NEG_Y),
    ("x", 1, Direction.POS_X, Action.FWD, Direction.POS_X),
    ("x", -1, Direction.POS_X, Action.BACK, Direction.NEG_X),
    ("y", 1, Direction.NEG_X, Action.LEFT, Direction.POS_Y),
    ("y", -1, Direction.NEG_X, Action.RIGHT, Direction.NEG_Y),
    ("x", 1, Direction.NEG_X, Action.BACK, Direction.POS_X),
    ("x", -1, Direction.NEG_X, Action.FWD, Direction.NEG_X),
)

# Heading -> (image coordinate to centre on, expected marker angle).
_ALIGN_TARGETS = {
    Direction.POS_X: ("y", -90),
    Direction.NEG_X: ("y", 90),
    Direction.POS_Y: ("x", 0),
    Direction.NEG_Y: ("x", 180),
}

# Action -> (left wheel sign, right wheel sign).
_WHEEL_SIGNS = {
    Action.FWD: (1, 1),
    Action.BACK: (-1, -1),
    Action.LEFT: (-1, 1),
    Action.RIGHT: (1, -1),
}


class Vehicle:
    """Drives two motors and follows a list of steps between grid markers."""

    def __init__(self, encoder: Encoder, link: QrLink, astar: AStar) -> None:
        self.encoder = encoder
        self.link = link
        self.astar = astar
        self.speed = DEFAULT_SPEED
        self.direction = Direction.POS_Y
        self.state = CtrlState.START
        self.step_index = 0
        self.steps: List[Step] = []
        self.qr_data = QrData(0, 0, 0, 0.0)
        self.error_pos_qr = 0
        self.error_ang_qr = 0
        self.forward_10 = False
        self.turn_left_90 = False
        self.turn_right_90 = False
        self.left_motor = MotorChannel()
        self.right_motor = MotorChannel()
        self.stop()

    def stop(self) -> None:
        for motor in (self.left_motor, self.right_motor):
            motor.direction_high = False
            motor.duty = 0

    def left(self, pwm: int) -> None:
        """Drive the left wheel; positive is forward."""
        if pwm > 0:
            self.left_motor.direction_high = True
            self.left_motor.duty = PWM_MAX - pwm
        else:
            self.left_motor.direction_high = False
            self.left_motor.duty = -pwm

    def right(self, pwm: int) -> None:
        """Drive the right wheel; zero and positive are forward."""
        if pwm >= 0:
            self.right_motor.direction_high = True
            self.right_motor.duty = PWM_MAX - pwm
        else:
            self.right_motor.direction_high = False
            self.right_motor.duty = -pwm

    def build_steps(self, path: Sequence[Node]) -> None:
        """Turn a node path into steps, starting from the current heading."""
        if not path:
            raise ValueError("path is empty")
        self.step_index = 0
        steps = [Step(path[0].id, Action.IDLE, self.direction)]
        heading = self.direction
        for prev, node in zip(path, path[1:]):
            delta = {"x": node.x - prev.x, "y": node.y - prev.y}
            for axis, value, required, action, new_heading in _STEP_RULES:
                if delta[axis] == value and heading == required:
                    steps.append(Step(node.id, action, new_heading))
                    heading = new_heading
        self.steps = steps

    def start_step(self, step: Step) -> None:
        signs = _WHEEL_SIGNS.get(step.action)
        if signs is None:
            return
        left_sign, right_sign = signs
        self.left(left_sign * self.speed)
        self.right(right_sign * self.speed)

    def process_steps(self) -> None:
        self.start_step(self.steps[self.step_index])

    def check_qr_code(self) -> bool:
        return self.link.available()

    def process_qr_code(self) -> None:
        """Compute position and angle errors against the current marker reading."""
        axis, target_angle = _ALIGN_TARGETS[self.steps[self.step_index].direction]
        target_position = self.qr_data.x if axis == "x" else self.qr_data.y
        self.error_pos_qr = target_position - FRAME_CENTER
        self.error_ang_qr = int(target_angle - self.qr_data.angle)