# scivis

Small building blocks for scientific visualization, built on NumPy.
Each module computes the data a renderer would draw: images as
`(height, width, components)` uint8 arrays, vertex buffers as flat float
arrays, meshes as lists of points.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `scivis.color` – HSV to RGB conversion. `convert_func(n, h, s, v)`
  computes one channel (`n` = 5, 3, 1 for red, green, blue);
  `hsv_position_to_rgb(x, y)` maps a normalised picker position (hue along
  x, saturation along y, value 1) to an RGB triple; `hsv_picker_image(width,
  height)` builds the RGBA picker image; `describe_position(x, y, width,
  height)` returns a text such as `"HSV: [...]  RGB: [...]"` for a window
  position, or `None` outside the window.
- `scivis.water` – `WaveSimulation(width, height, c, dx, dt)`, a discrete
  wave equation on a periodic grid. `step()` advances one time step and
  returns an RGB image (positive heights in red, negative in green);
  `impulse(x, y)` sets a grid cell to +1 or -1 in turn and returns `False`
  for cells outside the grid.
- `scivis.imaging` – `to_grayscale(image, uniform)`, `convolve(image,
  kernel)` (absolute filter response, border pixels left as they are),
  `mean_kernel(size)`, the `SOBEL_X` and `SOBEL_Y` kernels,
  `gradient_image(width, height)` as a test picture, and `to_ascii(image,
  small_table)` for ASCII art using `ASCII_LUT_SMALL` or `ASCII_LUT_LARGE`.
- `scivis.arcball` – `ArcBall(width, height)` maps window positions onto a
  virtual sphere (`map_to_sphere`); `click(x, y)` starts a drag and
  `drag(x, y)` returns a `Quaternion(x, y, z, w)`. `set_window_size` and
  `set_radius` adjust it.
- `scivis.volume` – `Volume`, an 8-bit voxel grid stored x-fastest, with
  `normalize_scale()`, trilinear `sample(u, v, w)` and `resample(width,
  height, depth)`, voxel lookup `value(u, v, w)`, central-difference
  `compute_normals()`, and a text dump through `str()`.
- `scivis.qvis` – `load_qvis(filename)` reads a QVis `.dat` header and the
  raw file it names into a `Volume`. 8-bit formats (`char`, `uchar`,
  `byte`) are read as they are; anything else is read as 16-bit little
  endian and scaled to 8 bits. Only little endian data is accepted.
  Problems raise `QVisFileError`. `parse_dat_line(line)` splits one
  `key: value` line into a `DatLine(id, value)`, trimmed and lower-cased.
- `scivis.flowfield` – `Flowfield(size_x, size_y, size_z)` with
  trilinear `interpolate(pos)` for positions in the unit cube,
  `Flowfield.gen_demo(size, demo_type)` for the analytic fields of
  `DemoType` (`DRAIN`, `SADDLE`, `CRITICAL`), and `Flowfield.from_file`
  for comma-separated field files. `line_points_to_render_data` and
  `particle_render_data` turn curve points and particle positions into
  flat buffers of seven floats per vertex (position in [-1, 1] plus RGBA).
- `scivis.flowfield4d` – `Flowfield4D(size_x, size_y, size_z, timesteps)`,
  interpolated in space and linearly in time, with time steps wrapping
  around; `Flowfield4D.gen_demo(size, demo_types)` builds a two-step field.
  `advect(field, position, t, delta_t)` makes one explicit Euler step and
  leaves particles outside the unit cube where they are.
- `scivis.clipper` – `tri_plane(positions, normal, d)` clips a triangle
  list against the plane `dot(normal, p) + d = 0`, removing the positive
  side, and returns the clipped list and the new vertices on the plane.
  `mesh_plane` also closes the cut with a triangle fan; `mesh_plane_flat`
  does the same on a flat `x, y, z, ...` sequence.
- `scivis.marching_squares` and `scivis.marching_cubes` – the case tables
  (`EDGE_TABLE`, `EDGE_TO_VERTEX`, `VERTEX_POSITIONS`, and for cubes
  `TRIANGLE_TABLE`), `case_index(corners, isovalue)`, and for cubes
  `triangle_edges(case)`. `marching_squares.grid_lines(width, height)`
  builds a line buffer outlining pixel centres.

## Example

```python
from scivis.flowfield import DemoType, Flowfield

field = Flowfield.gen_demo(64, DemoType.SADDLE)
velocity = field.interpolate((0.25, 0.5, 0.75))
```

## What the package does not do

- It opens no window and draws nothing; there is no interactive viewer,
  no raycaster and no command to run. Its output is arrays and lists for
  a renderer of your choice.
- The marching squares and marching cubes modules provide the case tables
  and case lookup only; they do not extract complete isolines or
  isosurfaces from an image or a volume.
- There is no line integral convolution, and no streamline, pathline or
  streakline tracer beyond the single Euler step of
  `scivis.flowfield4d.advect`.
- Images are not read from or written to image files.