# meshview

This package holds the logic of an interactive polygon-mesh viewer. It has no
dependency on a window system or a graphics API. Its only dependency is numpy.

## What is in it

- **`meshview.faces.Faces`**: face connectivity over a flat `coord_index`
  list in which a negative separator, conventionally `-1`, ends each face.
  The separators count as corners. You can ask for the number of vertices,
  faces and corners, the size and first corner of a face, the vertex at a
  face corner, the face that owns a corner, and the next corner in the
  face's cyclic order. An out-of-range face or corner raises `IndexError`.
  Asking about a separator corner raises `ValueError`. A non-empty
  `coord_index` that does not end in a separator also raises `ValueError`.
- **`meshview.logo`**: `build_logo()` returns a `LogoMesh`. This is the
  extruded ring-and-bar triangle mesh, with one normal per face, that the
  viewer uses as its default scene. A `LogoMesh` can report
  `number_of_faces()` and `number_of_vertices()`. It also gives
  `bounding_box()` as a `(minimum, maximum)` pair.
- **`meshview.buffer`**:
  - `build_face_set_buffer` triangulates each face as a fan.
  - `build_line_set_buffer` splits each polyline into segments.
  - Normals and colours can be given per vertex, per face or per corner,
    with or without index lists.
  - When there are no separators, either builder emits the coordinates as
    a point cloud.
  - Both builders return a frozen `VertexBuffer`. Its `buffer_type` is one
    of the `BufferType` values `MATERIAL`, `MATERIAL_NORMAL`, `COLOR` or
    `COLOR_NORMAL`.
  - `interleaved()` returns a flat float32 array that holds, for each
    vertex, its position, then its normal, then its colour.
- **`meshview.layout`**:
  - `attribute_layout(buffer_type)` gives the `Attribute` entries for an
    interleaved buffer: name, byte offset, component count and byte stride.
  - `draw_mode(buffer)` picks `DrawMode.TRIANGLES`, `LINES` or `POINTS`.
  - `ShaderSettings` holds the point size (default 4) and the line width
    (default 2). It stores negative values as zero. It also holds a 4×4
    `mvp_matrix`.
- **`meshview.viewer_data`**: `ViewerData` holds the current scene, which can
  be any object or `None`, together with the bounding-box grid settings:
  - `bbox_depth`, clamped to 0..10 and starting at 0;
  - `bbox_scale`, never negative and starting at 1.05;
  - `bbox_cube` and `bbox_occupied`.

  `clamp_depth` and `clamp_scale` apply the same limits on their own.
- **`meshview.interaction`**: the view is split into a 3×3 grid of mouse
  zones, numbered 0–8 row by row from the top left.
  - `mouse_zone` maps a pixel to its zone.
  - `zone_hint` gives the hover hint for a zone.
  - `press_message` gives the status message for a button press. It returns
    `None` when the current message should be left unchanged.
  - `release_action` returns a `ReleaseAction`: home view, invert normals,
    stop animation or restart animation.
  - `handle_rectangle` gives the highlight rectangle for a zone in unit view
    coordinates. It returns `None` for the centre zone.
  - `handle_quad` turns that rectangle into two triangles.
- **`meshview.navigation`**: `Camera` manages the view:
  - `reset` frames a bounding box.
  - `set_home_view` restores the home orientation.
  - `zoom` keeps the eye at least a quarter diameter from the centre.
  - `projection` builds the perspective matrix.
  - `model_view_projection` gives the full transform.
  - `advance_animation` spins the scene one step.
  - `drag` turns a mouse drag into a rotation or translation, depending on
    the zone and the button.
  - `wheel` zooms by one notch.

  The module also provides `perspective` and `rotation` matrix helpers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from meshview.faces import Faces
from meshview.buffer import build_face_set_buffer

coord_index = [0, 1, 2, -1, 2, 3, 0, -1]
faces = Faces(4, coord_index)
faces.number_of_faces()     # 2
faces.face_size(1)          # 3
faces.next_corner(2)        # 0 (wraps around within the face)

coord = [0, 0, 0,  1, 0, 0,  1, 1, 0,  0, 1, 0]
buf = build_face_set_buffer(coord, coord_index)
buf.number_of_vertices()    # 6: two triangles
buf.interleaved()           # flat float32 array, 3 positions per vertex here
```

```python
from meshview.navigation import Camera

camera = Camera()
camera.reset((0.0, 0.0, 0.0), 2.0)
camera.wheel(True)                       # move the eye one notch outward
matrix = camera.projection(800, 600)     # 4x4 perspective matrix
```

## What it does not do

The package opens no window, draws nothing and compiles no shaders. It
produces the buffers, layouts, matrices and messages that a renderer would
use, but it has no renderer of its own.

It also does not:

- read or write mesh files;
- define a scene-graph type (`ViewerData` stores whatever object it is
  given);
- provide a command to run.