# agvnav

Path planning and motion sequencing for a small automated guided vehicle
that drives across a floor grid of markers.

The floor is a 4 × 3 grid of twelve markers, numbered 0 to 11 row by row
(marker `i` sits at column `i % 4`, row `i // 4`). The vehicle plans a
route with A*, turns the route into a list of moves (forward, back, turn
left, turn right) relative to the way it is facing, and advances one move
at a time, using each marker reading it receives to line itself up before
the next move.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
agvnav [--start ID] [--goal ID]
```

Plans a route from marker `--start` (default 0) to marker `--goal`
(default 11) and prints it as `->0->1->...`, followed by a blank line.
Marker ids outside 0–11 are rejected. If no route exists it prints
`no route found` to standard error and exits with status 1.

It then reads marker readings from standard input, one `id,x,y,angle`
line at a time. For each line it runs the control loop twice and prints
the vehicle's state and step index, for example `ALIGN_QR step=0`. It
stops when the state reaches `STOP`, or prints `route complete` when a
step would be started past the end of the plan, or when input ends.

```
printf '0,320,240,0\n0,320,240,0\n' | agvnav --start 0 --goal 3
```

## Library use

```python
from agvnav.astar import AStar
from agvnav.encoder import Encoder
from agvnav.qrlink import QrLink
from agvnav.vehicle import Vehicle
from agvnav.controller import Controller

astar = AStar()
path = astar.find_path(astar.node(0), astar.node(11))
print(" -> ".join(str(node.id) for node in path))

link = QrLink()
vehicle = Vehicle(Encoder(), link, astar)
vehicle.build_steps(path)

controller = Controller(vehicle, link)
link.feed(b"3,320,240,0\n")   # id, x, y, angle as sent by the camera
controller.tick()
print(vehicle.state.name)     # ALIGN_QR
```

The modules:

- `agvnav.astar` — `Node` and `AStar`. `AStar()` builds the twelve-node
  grid, with `start` (node 0) and `goal` (node 11) preset;
  `AStar.node(node_id)` returns a node and raises `IndexError` for an
  unknown id. `find_path(start, goal)` searches with four-way moves and a
  Manhattan-distance heuristic, skips nodes whose `blocked` flag is set,
  and returns the list of nodes from start to goal, or `[]` if there is
  none. The search writes its costs and parents into the grid's nodes.
- `agvnav.encoder` — `Encoder`: left and right wheel pulse counters.
  `pulse_left()` / `pulse_right()` count only between `start()` (which
  also clears the counts) and `stop()`; `left()` / `right()` read them.
- `agvnav.qrlink` — `QrData`, `parse_qr_line(line)` and `QrLink`. Lines
  are `id,x,y,angle`; each field is read as a leading integer and a
  missing or unreadable field reads as 0. `QrLink.feed(data)` buffers
  bytes or text, `available()` tells whether anything is buffered, and
  `read()` takes one line and parses it.
- `agvnav.vehicle` — `Vehicle`, `Step`, `Action`, `Direction`,
  `CtrlState` and `MotorChannel`. `Vehicle.left(pwm)` / `right(pwm)`
  set each motor's direction level and duty (`left_motor`,
  `right_motor`), `stop()` clears both. `build_steps(path)` turns a
  node path into `steps`, starting from the current `direction`, and
  raises `ValueError` on an empty path. `process_qr_code()` sets
  `error_pos_qr` (offset from image centre 320) and `error_ang_qr`
  for the current step's heading.
- `agvnav.remote` — `RemoteControl(vehicle).handle(pin, value)`: manual
  driving through numbered virtual pins. Pins 0–3 drive forward,
  backward, turn left and turn right while the value is non-zero and
  stop on zero; pin 4 sets the speed to `value * 10 + 100` and prints
  it; pins 8, 9 and 10 set the vehicle's `forward_10`, `turn_left_90`
  and `turn_right_90` flags. Other pins are ignored.
- `agvnav.controller` — `Controller(vehicle, link).tick()`: one pass of
  the control loop that alternates between aligning on a marker and
  running the next step; and `main`, the `agvnav` command.

## What it does not do

The package models motor outputs and encoder counts as plain values; it
does not drive motors, read wheel sensors or open a serial port. Marker
readings reach it only through `QrLink.feed`. `RemoteControl` handles pin
writes handed to it but does not connect to any remote-control service.
The `forward_10`, `turn_left_90` and `turn_right_90` flags are set but
nothing acts on them.