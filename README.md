# olafengine

The engine-independent core of a small 3D engine, in plain Python with numpy.

## What is in it

- **Input state** (`olafengine.keys`, `olafengine.keyboard`, `olafengine.mouse`)
  - `KeypressType` names keys by their scancode. `scancode_for_char` turns a
    letter (either case), a digit or one of a few punctuation characters into a
    scancode, and raises `InvalidKeyError` for anything else.
  - `KeyboardState` keeps one held flag for each of 256 scancodes. Keys may be
    given as a character, a `KeypressType` or an integer scancode.
    `update(pressed)` takes a new snapshot indexed by scancode (entries past the
    end count as released); `is_held`, `is_all_held`, `is_any_held` query it and
    `release(key)` clears one key for the rest of the frame.
  - `MouseState` holds the position, the per-frame motion, the wheel motion and
    a button mask; `is_pressed(MouseButton.LEFT)` and the `left_clicked`,
    `right_clicked`, … properties read the mask.
- **ECS building blocks** (`olafengine.bitmask`, `olafengine.linker`)
  - `ECSBitmask` is a 128-bit component mask with `assign`, `unassign`, `has`,
    `&`, `==`, truth testing, and a `str()` that prints the bits high to low in
    groups of eight.
  - `Entity` is a frozen id; `EntityLinker` stores one mask per entity and only
    grows or shrinks when `resize` is called.
- **Containers**
  - `IdStack` (`olafengine.idstack`): a LIFO stack of integer ids; `pop` and
    `top` raise `IndexError` when it is empty.
  - `MapVector` (`olafengine.map_vector`): elements in slots reachable by key or
    by slot index. Removing an element frees its slot, and the next `add` reuses
    the most recently freed slot. `len()` counts slots, freed ones included;
    iteration yields only live elements.
  - `ReferenceCounter` (`olafengine.refcount`): a thread-safe shared count with
    `share`, `take` and `release`, usable as a context manager.
- **Render primitives** (`olafengine.colors`, `olafengine.transform`)
  - `RGBA` colours and a named palette (`red`, `blue`, …, and `exact.*`).
  - `Vertex`, `VertexBuffer`, `Mesh`, `Transform` and `Model`.
    `Transform.compose()` returns the 4×4 model matrix (translation × rotation ×
    scale); rotations are `(w, x, y, z)` quaternions, and `quat_from_euler`
    builds one from Euler angles in radians.
- **Camera** (`olafengine.camera`): `Camera` with `view()`,
  `projection(width, height)`, movement helpers and `toggle_orthographic()`,
  plus the `look_at` and `perspective` matrix functions.
- **Shapes** (`olafengine.raw_shapes`, `olafengine.shapes`)
  - Vertex and index data for a box, a square-based pyramid and a cylinder of
    1 to 40 segments (`box_vertices`, `prism_vertices`, `prism_indices`,
    `cylinder_vertices(detail)`, `cylinder_indices(detail)`), and the
    `*_scale` functions that turn sizes into scale vectors.
  - `Box3D`, `Prism3D` and `Cylinder3D` handles built from a `Model`, with
    `rotate_x`/`rotate_y`/`rotate_z`, `set_pos`, `move` and `to_model()`.

All matrices are numpy arrays acting on column vectors.

## Installation

```
pip install olafengine
```

## Example

```python
from olafengine.camera import Camera
from olafengine.keyboard import KeyboardState
from olafengine.keys import KeypressType
from olafengine.transform import Transform

keyboard = KeyboardState()
pressed = [False] * KeyboardState.MAX_KEYS
pressed[KeypressType.KEY_W] = True
pressed[KeypressType.KEY_LSHIFT] = True
keyboard.update(pressed)

camera = Camera()
if keyboard.is_all_held("w", KeypressType.KEY_LSHIFT):
    camera.move_forward(0.5)

transform = Transform()
transform.set_pos(1.0, 0.0, -2.0)
transform.set_scale(2.0, 2.0, 2.0)

mvp = camera.projection(800, 600) @ camera.view() @ transform.compose()
print(mvp)
```

## What it does not do

The package opens no window, talks to no GPU and runs no event loop. It does
not read the keyboard or mouse itself: `KeyboardState.update` and
`MouseState.update` must be fed by whatever library you use for input.
`VertexBuffer` and `Mesh` only hold integer handles; nothing here creates
buffers, compiles shaders, loads textures or draws a `Model`.

## Running the tests

```
pip install -e ".[test]"
pytest
```