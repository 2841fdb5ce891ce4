"""Control loop that walks the vehicle along its planned steps."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from agvnav.astar import NODE_COUNT, AStar
from agvnav.encoder import Encoder
from agvnav.qrlink import QrLink
from agvnav.vehicle import CtrlState, Vehicle

ALIGN_SPEED = 110
RUN_SPEED = 120
POSITION_TOLERANCE = 10
ANGLE_TOLERANCE = 5


class Controller:
    """Advances the vehicle's state machine from marker readings."""

    def __init__(self, vehicle: Vehicle, link: QrLink) -> None:
        self.vehicle = vehicle
        self.link = link

    def tick(self) -> None:
        """Run one iteration of the control loop.

        Raises IndexError when a step is started past the end of the plan.
        """
        v = self.vehicle
        qr_available = v.check_qr_code()
        if qr_available:
            v.qr_data = self.link.read()
            if v.state in (CtrlState.DONE_STEP, CtrlState.START):
                v.stop()
                v.speed = ALIGN_SPEED
                v.state = CtrlState.ALIGN_QR
            elif v.state == CtrlState.ALIGN_QR:
                v.process_qr_code()
                if v.error_pos_qr < POSITION_TOLERANCE and v.error_ang_qr < ANGLE_TOLERANCE:
                    v.stop()
                    v.state = CtrlState.DONE_QR
                    if v.step_index < len(v.steps):
                        v.speed = RUN_SPEED
                        v.direction = v.steps[v.step_index].direction
                        v.step_index += 1
                    else:
                        v.state = CtrlState.STOP
        if not qr_available and v.state == CtrlState.DONE_QR:
            v.state = CtrlState.RUN_STEP
        if v.state == CtrlState.RUN_STEP:
            v.process_steps()
            v.state = CtrlState.DONE_STEP


def main(argv: Optional[List[str]] = None) -> int:
    """Plan a route, then drive it from marker readings given on standard input."""
    parser = argparse.ArgumentParser(
        prog="agvnav",
        description="Plan a route between grid markers and follow it from "
        "'id,x,y,angle' readings read from standard input.",
    )
    parser.add_argument("--start", type=int, default=0, help="start marker id")
    parser.add_argument("--goal", type=int, default=NODE_COUNT - 1, help="goal marker id")
    args = parser.parse_args(argv)
    for value in (args.start, args.goal):
        if not 0 <= value < NODE_COUNT:
            parser.error(f"marker id must be between 0 and {NODE_COUNT - 1}")

    astar = AStar()
    link = QrLink()
    vehicle = Vehicle(Encoder(), link, astar)
    path = astar.find_path(astar.node(args.start), astar.node(args.goal))
    print("".join(f"->{node.id}" for node in path))
    print()
    if not path:
        print("no route found", file=sys.stderr)
        return 1
    vehicle.build_steps(path)

    controller = Controller(vehicle, link)
    for line in sys.stdin:
        link.feed(line if line.endswith("\n") else line + "\n")
        try:
            controller.tick()
            controller.tick()
        except IndexError:
            vehicle.stop()
            print("route complete")
            break
        print(f"{vehicle.state.name} step={vehicle.step_index}")
        if vehicle.state == CtrlState.STOP:
            break
    return 0