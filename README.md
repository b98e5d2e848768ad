# aigames

A small, dependency-free toolkit for 2D game simulations driven by simple AI
agents. It has three parts:

- `aigames.core`: the building blocks. 2D vectors (`Vector2`, plus a plain
  `Vector3`), integer grid points (`Point2D`), `Transform`, RGBA colours
  (`Color32`, `Colorf` and the named palette `Color`), outlined polygons
  (`Polygon`, `Circle`, `Square`, `Hexagon`), a frame loop (`Engine`) and the
  `GameObject` base class whose `start`, `update`, `on_gui` and `on_draw` hooks
  the engine calls.
- `aigames.catchthecat`: a pursuit game on a staggered hexagonal grid. The
  `Cat` follows the shortest path to the border of the board; the `Catcher`
  blocks one cell per turn to trap it.
- `aigames.flocking`: a boids simulation. Each `Boid` is steered by weighted
  `FlockingRule`s (`SeparationRule`, `CohesionRule`, `AlignmentRule`,
  `MouseInfluenceRule`, `BoundedAreaRule`, `WindRule`), and a `FlockingWorld`
  creates the flock and keeps it inside the window area.

## Installation

```
pip install .
```

Python 3.10 or later is required. The package has no runtime dependencies.

## Playing catch-the-cat from the command line

```
catch-the-cat
```

This plays one game on a 21×21 board with random walls, turn by turn until
one side wins, then prints the final board (`C` for the cat, `#` for walls,
`.` for free cells) and the winner.

## Using the library

### Vectors and points

```python
from aigames.core.vectors import Vector2
from aigames.core.point2d import Point2D

v = Vector2(3.0, 4.0)
v.magnitude()                        # 5.0
v.normalized()                       # unit vector in the same direction
Vector2.up().rotate(90)              # rotate by degrees
Vector2.distance(Vector2.zero(), v)  # 5.0

Point2D(1, 2) + Point2D.RIGHT        # Point2D(x=2, y=2)
str(Point2D(1, 2))                   # "(1, 2)"
```

`Vector2` uses screen coordinates: `Vector2.up()` is `(0, -1)`. Two vectors
compare equal when their squared distance is below `1e-6`.

### Colours

```python
from aigames.core.color import Color, Color32, Colorf

Color32.from_packed(0xFF0000FF)      # red; packed as 0xAABBGGRR
Color.RED.packed()                   # 0xFF0000FF
Color.RED.light()                    # halfway to white
Colorf.hsv_to_rgb(0.0, 1.0, 1.0)     # pure red as floats
```

### The hexagonal grid

```python
from aigames.core.point2d import Point2D
from aigames.catchthecat import hexgrid

origin = Point2D(0, 0)
hexgrid.neighbors(origin)                          # the six adjacent cells
hexgrid.is_neighbor(origin, hexgrid.east(origin))  # True
```

Odd rows are shifted half a cell to the right of even rows.

### Playing a catch-the-cat board

```python
from aigames.core.engine import Engine
from aigames.core.point2d import Point2D
from aigames.catchthecat.world import World

engine = Engine("Catch The Cat")
world = World(engine, 11)          # odd side size; random walls, cat in the centre
world.step()                       # the cat or the catcher makes one move
print(world)

# A board from an explicit state, listed row by row from the top left:
state = [False] * 25
custom = World.from_state(engine, 5, True, Point2D(0, 0), state)
custom.cat_wins_on_space(Point2D(2, 0))  # True: on the border
```

`World.update(delta_time)` plays a turn whenever its turn timer runs out while
`is_simulating` is set. After a win, the next `step()` starts a fresh board.

### Flocking

Everything that draws takes a renderer: any object with
`set_draw_color(r, g, b, a)` and `draw_line(x1, y1, x2, y2)`.

```python
from aigames.core.engine import Engine
from aigames.core.vectors import Vector2
from aigames.flocking.world import FlockingWorld


class LineRecorder:
    def __init__(self):
        self.lines = []

    def set_draw_color(self, r, g, b, a):
        pass

    def draw_line(self, x1, y1, x2, y2):
        self.lines.append((x1, y1, x2, y2))


engine = Engine("Flocking", renderer=LineRecorder(), window_size=Vector2(800, 600))
flock = FlockingWorld(engine)
engine.start()                     # creates the rules and 300 boids
for _ in range(60):
    engine.tick(1 / 60)
```

All rules share one interface: `compute_weighted_force(neighborhood, boid)`
returns the rule's force scaled by its weight, or zero when the rule is
disabled. Rules are copied with `clone()` and handed to a boid with
`Boid.set_flocking_rules`. `FlockingWorld` offers `set_number_of_boids`,
`set_detection_radius`, `set_speed`, `set_max_acceleration` and
`restore_default_weights`. `MouseInfluenceRule` reads its target from its
`mouse_position` attribute (`None` when no button is pressed), and
`WindRule` takes its angle in radians.

### Input

`Engine.tick(delta_time, events, renderer)` accepts `KeyEvent(key, pressed)`
values with `Key.UP`, `Key.DOWN`, `Key.LEFT` and `Key.RIGHT`;
`Engine.input_arrow()` gives the summed direction of the keys held. The
flocking world pushes its first boid along that direction.

## What the package does not do

There is no window, graphics backend, event source or on-screen interface.
`Engine` only runs the frame loop; drawing goes to whatever renderer object
you pass in, input arrives only as the `KeyEvent`s you give to `tick`, and the
`on_gui` hook merely keeps the context it is handed. The flocking simulation
has no command of its own, and the `catch-the-cat` command prints its result
as text rather than showing a board.

## Running the tests

```
pip install .[test]
pytest
```