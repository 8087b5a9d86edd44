# gpupixel

Building blocks for an image-processing pipeline, in plain Python with no
third-party dependencies.

## What is inside

- `gpupixel.matrix`: `Matrix3` and `Matrix4`, matrices stored column-major in
  their `m` list. `set` takes another matrix of the same size, a column-major
  sequence, or 9 / 16 numbers given row by row. `add`, `subtract` and
  `multiply` work in place with a number or, element-wise, with another
  matrix; the operators `+`, `-`, `*` (and their in-place forms) do the same
  on copies. Also `negate`/`negated`, `transpose`/`transposed`,
  `set_identity`, `identity()`, `from_array()` and `copy()`.
- `gpupixel.vector`: `Vector2`, a mutable 2D vector with `add`, `subtract`,
  `dot`, `distance_squared`, `length_squared`, `negate`, `scale` (by a number
  or component-wise by a vector), `smooth` towards a target, `from_points`,
  and arithmetic and ordering operators (ordering compares `x`, then `y`).
- `gpupixel.dispatch_queue`: `LocalDispatchQueue`, whose tasks run on the
  thread that calls `process_one` or `process_all`, and `DispatchQueue`, which
  runs tasks on worker threads: one for `QueueType.SERIAL`, one per CPU for
  `QueueType.CONCURRENT`. `wait` blocks until the queue is idle, `stop` ends
  the workers and skips tasks not yet started, `join` does both in turn. A
  `DispatchQueue` can be used in a `with` block, which joins it on exit.
- `gpupixel.rotation`: the enums `RotationMode`, `CameraPosition` and
  `InterfaceOrientation`, with `rotation_swaps_size` and
  `camera_output_rotation`, which picks the rotation for camera frames from
  the camera side, the interface orientation and the mirroring flags.
- `gpupixel.source`: `Source`, which holds a framebuffer and an output
  rotation and passes them on to its targets.
- `gpupixel.util`: `str_format` (printf-style `%` formatting), `log` (writes
  the formatted line to standard output), `now_time_ms`,
  `set_resource_root` and `get_resource_path`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from gpupixel.matrix import Matrix4
from gpupixel.vector import Vector2
from gpupixel.rotation import (
    CameraPosition, InterfaceOrientation, RotationMode,
    camera_output_rotation, rotation_swaps_size,
)
from gpupixel.dispatch_queue import DispatchQueue, QueueType

m = Matrix4.identity()
m.add(1.0)                # every element plus one
t = m.transposed()

v = Vector2(3.0, 4.0)
print(v.length_squared())  # 25.0

mode = camera_output_rotation(
    CameraPosition.BACK, InterfaceOrientation.PORTRAIT,
    mirror_front=False, mirror_rear=False,
)
assert mode is RotationMode.ROTATE_RIGHT
assert rotation_swaps_size(mode)

results = []
with DispatchQueue(QueueType.SERIAL) as queue:
    queue.add(lambda: results.append(1))
assert results == [1]
```

### Sources and targets

A `Source` works with any framebuffer object that has `width` and `height`,
and any target object with these methods: `next_available_texture_index()`,
`set_input_framebuffer(framebuffer, rotation, tex_idx)`, `is_prepared()`,
`update(frame_time)` and `unprepare()`.

```python
from dataclasses import dataclass
from gpupixel.rotation import RotationMode
from gpupixel.source import Source

@dataclass
class Frame:
    width: int
    height: int

class Printer:
    def next_available_texture_index(self):
        return 0
    def set_input_framebuffer(self, framebuffer, rotation, tex_idx):
        self.frame, self.rotation = framebuffer, rotation
    def is_prepared(self):
        return True
    def update(self, frame_time):
        print("frame at", frame_time, self.rotation.name)
    def unprepare(self):
        pass

source = Source()
source.add_target(Printer())
source.set_framebuffer(Frame(640, 480), RotationMode.ROTATE_RIGHT)
print(source.rotated_framebuffer_width())  # 480
source.proceed(frame_time=40)
```

## What this package does not do

There is no rendering here: no GPU context, no shaders, no filters and no
framebuffer implementation. Nothing captures from a camera or loads image
files; `camera_output_rotation` only computes a rotation, and `Source` only
hands whatever framebuffer object it is given on to its targets.