# gamemath

A small toolkit for games and graphics work with no dependencies outside the
standard library.

## Modules

- `gamemath.vectors`: plain functions on 3D vectors (tuples of floats),
  planes `(a, b, c, d)` and 3x3/4x4 matrices (tuples of rows, applied to row
  vectors, so translation sits in the bottom row). Includes `dot`, `cross`,
  `normalize` (returns the unit vector and the original length), `angle`,
  `angle3`, `dihedral`, `rotate_vector3`/`rotate_vector4` (about a unit
  vector), `rotate_axis3`/`rotate_axis4` (about `'x'`, `'y'` or `'z'`, with
  any other axis giving the identity), `scale_matrix4`, `translate_matrix4`,
  `transpose4`, `back_transform4`, `plane_from_points`, `plane_from_normal`,
  `distance_to_plane`, `shadow_matrix` (projection onto the plane y = 0 from a
  homogeneous light position), and `format_matrix4`/`format_vector` for text
  output. All angles are in radians.
- `gamemath.matrixstack`: `MatrixStack(depth)`, a fixed-depth stack of 4x4
  matrices. `push` duplicates the top and raises `IndexError` when the stack
  is full; `pop` discards the top and does nothing on the last matrix.
  `rotate`, `translate` and `scale` pre-multiply the top matrix; `load`,
  `load_identity`, `transpose`, `back_transform`, `top` and `transform` act
  on it. `Rect` is a dataclass rectangle with `set`, `set_from_points`,
  `clear`, `width` and `height`.
- `gamemath.noise`: `NoiseGenerator(frequency)`, classic gradient (Perlin)
  noise that repeats every `frequency` lattice cells (1 to 256), with
  `noise1`, `noise2`, `noise3` and fractal sums `fractal1`, `fractal2`,
  `fractal3`. The tables come from a fixed seed, so results are repeatable.
  `make_noise_texture(size=128)` returns the bytes of a `size`³ RGBA volume,
  one noise octave per channel.
- `gamemath.timer`: `FrameTimer(clock=None)`, frame bookkeeping driven by a
  millisecond clock (by default, milliseconds since the timer was created):
  `start`, `update_frame_ticks`, `delta_time`, `sleep_time(fps)` and
  `current_ticks`.
- `gamemath.tcp_client` / `gamemath.tcp_server`: a minimal TCP exchange.
  `run_client(host, port, message=None, output=None)` sends one line and
  returns the replies received until the server closes; `serve_once(port,
  output=None)` accepts a single client, prints and returns its message and
  answers `Received your message`. Failures raise `ClientError` and
  `ServerError`.

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Examples

```python
from gamemath import vectors
from gamemath.matrixstack import MatrixStack
from gamemath.noise import NoiseGenerator

print(vectors.cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)))   # (0.0, 0.0, 1.0)

stack = MatrixStack(4)
stack.translate(1.0, 2.0, 3.0)
stack.push()
stack.scale(2.0, 2.0, 2.0)
print(stack.transform((1.0, 1.0, 1.0)))
stack.pop()

gen = NoiseGenerator(256)
print(gen.fractal3(0.3, 0.7, 1.1, 2.0, 2.0, 4))
```

Frame timing with your own clock:

```python
from gamemath.timer import FrameTimer
import time

timer = FrameTimer(lambda: int(time.monotonic() * 1000))
timer.start()
timer.update_frame_ticks()
print(timer.delta_time())
```

## Command-line tools

Start a server that waits for one message on a port, prints it, replies and
exits:

```
gamemath-tcp-server 5000
```

Connect to it, send a line read from standard input and print every reply
until the server closes the connection:

```
gamemath-tcp-client localhost 5000
```

## What it does not do

The package does no rendering and talks to no graphics or windowing system:
`make_noise_texture` only produces the texel bytes, and matrices are plain
tuples for you to hand to whatever renderer you use. The TCP tools handle a
single message from a single client; they are not a general chat server.