# pivk

Building blocks for a small 3D renderer, written against the standard library
only.

## Modules

- `pivk.matrix`: the immutable `Matrix` 4x4 class using the row-vector
  convention (points are multiplied on the left). It offers `identity`,
  `from_values` (16 values, row-major), `translate`, `scale`, `*`,
  `transpose`, `determinant`, `inverse` (returns the identity for a singular
  matrix), `transform_point`, `transform_vector`, `transform_normal` and
  `transform4x4` (a 3D point is divided by w; a 4D vector is returned whole).
  Helpers: `dot`, `cross`, `normalize`, `determ3x3`, `degrees_to_radians`,
  `radians_to_degrees`.
- `pivk.transforms`: `rotate_x`, `rotate_y`, `rotate_z` and `rotate` (angles
  in degrees), the look-at `view` matrix, and `frustum` and `ortho`
  projections.
- `pivk.camera`: `Camera` with `set_proj`, `resize`, `set_loc_at_up` and
  `frame_ray`, which returns `(origin, direction)` for a frame pixel. The
  camera keeps its `view`, `proj` and `vp` (view times projection) matrices
  up to date.
- `pivk.input`: `Keyboard`, `Mouse`, `Joystick` and `Input`, which track state
  between frames and detect clicks (a key or button that is down now but was
  not on the previous update). `JoystickState` holds one raw joystick reading
  and `axis_value` maps a raw axis position to `[-1, 1]`.
- `pivk.timer`: `Timer` with global time, pausable time (`is_pause`), per-frame
  deltas and an FPS value recomputed about once a second. The clock and an FPS
  callback can be supplied.
- `pivk.xml`: `parse_text` and `parse_file` for a small XML subset, returning a
  list of `XmlNode` (with `find_elem` and `find_elems`). The first line of the
  document is skipped as the declaration; truncated input raises
  `XmlSyntaxError`.
- `pivk.dae`: `Dae.from_file` / `Dae.from_text` and `load_geometry`, which
  returns a `(vertices, indices)` pair for each `<triangles>` group of each
  mesh. Positions and normals are read; texture coordinates are not.
- `pivk.topology`: `Vertex`, `PointVertex`, `PrimType`, `Topology` and
  `TriMesh`.
- `pivk.image`: `Image.from_bytes` / `Image.load` for G24 and G32 raw images
  (a little-endian 16-bit width and height, then BGR or BGRA pixels), each
  pixel kept as a 32-bit BGRA value.
- `pivk.console`: the `Color` enum and `console_color`, which packs text and
  background colours into one attribute value.
- `pivk.stock`: `Stock`, a list that appends with `<<` and has `walk`.
- `pivk.resources`: `Resource` and `ResourceManager`, a store keyed by a
  running number or by each entry's `name`.

## Install

```
pip install .
```

## Example

```python
from pivk.matrix import Matrix
from pivk.transforms import rotate_z
from pivk.camera import Camera

m = Matrix.translate((1, 2, 3)) * rotate_z(90)
print(m.transform_point((1, 0, 0)))

cam = Camera()
cam.resize(800, 600)
cam.set_loc_at_up((0, 0, 10), (0, 0, 0), (0, 1, 0))
origin, direction = cam.frame_ray(400, 300)
```

Loading geometry from a COLLADA file:

```python
from pivk.dae import Dae

for vertices, indices in Dae.from_file("model.dae").load_geometry():
    print(len(vertices), "vertices")
```

Tracking input once per frame, with states supplied by the caller:

```python
from pivk.input import Input

inp = Input()
keys = [0] * 256
keys[ord("A")] = 0x80
inp.update(keys, cursor=(120, 45), wheel=0)
print(inp.keyboard.keys_click[ord("A")], inp.mouse.mdx)
```

## What it does not do

The package opens no windows, draws nothing and talks to no graphics API;
`ResourceManager` only stores entries. It does not read devices either: the
input classes and the timer are fed raw key states, cursor positions,
joystick readings and clock values by the calling program. There is no
command-line program.

## Tests

```
pip install .[test]
pytest
```