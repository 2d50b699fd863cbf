# orrery

The geometry and scene math behind a small textured-sphere orrery: procedural
sphere and torus meshes, a free-fly camera, 4×4 transform builders, a
model-view matrix stack, frame timing, keyboard movement and the animated
sun / planet / moon arrangement.

Everything is plain `numpy`. No window or graphics context is needed, so the
results can be fed to whatever renderer you use or checked in tests.

## What is in the package

| Module | Contents |
| --- | --- |
| `orrery.transformations` | `build_translate`, `build_rotate_x`, `build_rotate_y`, `build_rotate_z`, `rotate`, `scale`, `look_at`, `perspective`, `normalize` |
| `orrery.camera` | `Camera`: position, yaw/pitch mouse look, scroll zoom, view and perspective matrices |
| `orrery.sphere` | `Sphere`: a unit UV sphere of a given precision with texture coordinates, normals and triangle indices |
| `orrery.torus` | `Torus`: a torus with texture coordinates, normals, both tangent sets and triangle indices |
| `orrery.shaders` | `read_shader_source`: read shader source text from a file |
| `orrery.scene` | `MatrixStack`, `MeshBuffers`, `FrameTimer`, `sphere_buffers`, `torus_buffers`, `single_model_view` |
| `orrery.solar` | `solar_system_model_views`: model-view matrices for the sun, a planet with its moon, and a second planet |
| `orrery.controls` | `Key`, `apply_movement`, `aspect_ratio`, `choose_model` |

## Example

```python
from orrery.camera import Camera
from orrery.controls import Key, apply_movement, aspect_ratio
from orrery.scene import FrameTimer, sphere_buffers
from orrery.solar import solar_system_model_views
from orrery.sphere import Sphere

sphere = Sphere(48)
buffers = sphere_buffers(sphere)   # float32 positions, tex_coords, normals
print(buffers.vertex_count)        # 48 * 48 * 6 triangle corners

camera = Camera((0.0, 0.0, 10.0))
timer = FrameTimer()

aspect = aspect_ratio(1280, 720)
delta = timer.tick(0.016)          # seconds since the previous tick

apply_movement(camera, {Key.W}, delta)   # fly forward
camera.compute_scroll(5.0)               # zoom in (field of view 45° -> 40°)

camera.calculate_perspective_matrix(aspect)
camera.calculate_view_matrix()

for name, model_view in solar_system_model_views(camera.view_matrix, 1.0).items():
    clip = camera.perspective_matrix @ model_view
```

`solar_system_model_views` returns a dict keyed `"sun"`, `"planet"`,
`"moon"` and `"second_planet"`, in draw order.

The single-model scene works the same way: `choose_model(option)` returns
`True` for the sphere and `False` only for the option `"torus"`; build the
mesh's buffers with `sphere_buffers` (an unindexed triangle list) or
`torus_buffers` (vertex attributes plus a `uint32` index list), and get its
spinning model-view matrix from `single_model_view(view, time)`.

## Details

* `Camera()` starts at `(0, 0, 5)` looking down −Z, with a 45° field of
  view, yaw −90°, pitch 0° and a mouse sensitivity of 0.1. The perspective
  matrix uses near and far planes of 0.1 and 1000.
* `Key` covers W/S (forward/back), D/A (right/left) and E/Q (up/down);
  `apply_movement` moves the camera 2.5 units per second for each key held.
* `MatrixStack` pushes copies, `push_top` duplicates the top matrix,
  `multiply_top` post-multiplies it, and popping or reading an empty stack
  raises `IndexError`.
* `read_shader_source` returns the file text followed by one extra newline
  and raises `FileNotFoundError` for a missing file.
* `normalize` of a zero vector, `aspect_ratio` with zero height, and a
  `Sphere` or `Torus` of precision below 1 raise `ValueError`.

## Conventions

* Matrices are 4×4 `numpy` arrays acting on column vectors, so transforms
  compose as `parent @ child`.
* Angles passed to the transform builders are in radians; the camera keeps
  its yaw, pitch and field of view in degrees.
* Pitch is clamped to ±89°, and the field of view to the range 1°–45°.

## What this package does not do

It opens no window, creates no graphics context, compiles no shaders, loads
no texture images and draws nothing; there is no command to run. It produces
the meshes, buffers and matrices that a renderer would upload and use.