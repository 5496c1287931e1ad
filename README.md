# gerberkit

`gerberkit` models Gerber (RS-274X) artwork in plain Python. It covers
bounding boxes, apertures, plot levels and the plotter state machine, and
it turns a plot into vector paths that any drawing backend can paint. It
needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `gerberkit.bound_box.BoundBox`: an axis-aligned box with `left`, `right`,
  `top` and `bottom` edges. It offers `width()`, `height()` and `center()`.
  `update()` and `update_box()` grow the box. `scale()` scales it in place
  and `scaled()` returns a scaled copy. The default box is inverted, so
  the first update sets it to the updated extent.
- `gerberkit.scanner.GerberFile`: a cursor over Gerber text, given as `str`
  or `bytes`. Its readers are `get_integer()`, `get_float()`,
  `get_coordinate(integer, decimal, omit_trailing_zeroes)` and
  `get_string()`. Each returns `None` when nothing could be read. It also has
  `peek_char()`, `get_char()`, `skip_whitespace()`, `end_of_file()` and the
  `query_char_*` helpers. It counts lines in `line_number`.
- `gerberkit.commands`: the render command model.
  - The enums `Command`, `Interpolation` and `Exposure`.
  - The `RenderCommand` record, with fields `x`, `y`, `w`, `h`, `a`,
    `end_x`, `end_y` and `aperture`.
  - Constructors: `begin_line`, `line`, `arc`, `circle`, `rectangle`,
    `close`, `stroke`, `fill`, `erase`, `begin_outline`, `end_outline`,
    `flash` and `aperture_select`.
- `gerberkit.gerber`: the `Gerber` document, the `Unit` enum and
  `to_mm(number, unit)`. A `Gerber` holds `levels`, `apertures` (a dict by
  D-code), `unit`, `name` and `negative`. `Gerber.bounding_box()` covers
  every level, step-and-repeat copies included.
- `gerberkit.apertures`: `CircleAperture`, `RectangleAperture`,
  `ObroundAperture`, `PolygonAperture` and `MacroAperture`.
  - Each has a `code` and a `bound_box`.
  - `render()` returns the commands that draw the shape.
  - `solid_circle()` and `solid_rectangle()` report a plain circle or a
    plain rectangle with no hole.
  - `MacroAperture` takes any object that has a
    `render(modifiers)` method returning render commands.
- `gerberkit.paths`: `Path`, `Primitive`, `PrimitiveType` and the scale
  factor `UNITS_PER_MM`.
  - A `Path` holds moves, lines and cubic curves.
  - It also has `add_rect()`, `add_ellipse()` and `arc_to()`. `arc_to()`
    approximates an arc with cubic curves of at most 45 degrees each.
- `gerberkit.aperture_level.ApertureLevel`: draws an aperture's commands
  into a list of `primitives`.
- `gerberkit.strokes`: `Segment` and `StrokesToFillsConverter`. The
  converter joins the stroked paths of a level into one filled outline.
  Ends closer than 1 µm are treated as touching.
- `gerberkit.gerber_level.GerberLevel`: one level of the plot.
  - It holds the render commands, polarity (`negative`), the step-and-repeat
    settings (`count_x`, `count_y`, `step_x`, `step_y`) and a `bound_box`.
  - `right()` and `top()` include the repeats.
  - `render(engine)` draws the commands into `primitives`.
  - A level that cannot be drawn raises `RenderError`, for example a path
    drawn with an aperture that is neither a solid circle nor a solid
    rectangle.
- `gerberkit.plotter.Plotter`: the plot head of one level.
  - Set `x`, `y`, `i`, `j`, `exposure`, `interpolation` and
    `multi_quadrant`, then call `do(line_number)`.
  - `aperture_select()`, `outline_begin()` and `outline_end()` change the
    tool and the region mode.
  - `angle()` computes an arc sweep.
  - The plotter adds commands to the level and grows the level's box.
- `gerberkit.transformation.Transformation`: zoom and pan state that fits a
  board box into a device area.
  - `painter_window()` and `painter_viewport()` return `Rect`s.
  - `scale()` zooms, limited to 0.1 through 20.
  - `move()` pans.
- `gerberkit.engine.PathEngine`: renders a whole `Gerber`.
  - `render_gerber()` returns one `DrawnLayer` per level.
  - A `DrawnLayer` holds the level's primitives, a `fill` and a `stroke`
    colour, and the `offsets` at which the layer is repeated.
  - `filled()` and `stroked()` split the primitives by how they are painted.
  - Negative levels are filled white. Other levels get a colour that
    changes from level to level.

## Example

```python
from gerberkit.apertures import CircleAperture
from gerberkit.bound_box import BoundBox
from gerberkit.commands import Exposure
from gerberkit.engine import PathEngine
from gerberkit.gerber import Gerber, Unit
from gerberkit.gerber_level import GerberLevel
from gerberkit.plotter import Plotter

gerber = Gerber(unit=Unit.MILLIMETERS)
level = GerberLevel(None, gerber.unit)
gerber.levels.append(level)

plotter = Plotter(level, None)
plotter.aperture_select(CircleAperture(10, 0.2, 0.0, 0.0), 1)
plotter.x, plotter.y = 0.0, 0.0
plotter.do(2)                      # move to the origin
plotter.exposure = Exposure.ON
plotter.x, plotter.y = 5.0, 0.0
plotter.do(3)                      # draw a line
plotter.exposure = Exposure.OFF
plotter.do(4)                      # lift the pen, ending the stroke

box = gerber.bounding_box()
print(box.width(), box.height())   # about 5.2 and 0.2

engine = PathEngine(box, BoundBox(0.0, 0.0, 0.0, 0.0), 800, 600)
for layer in engine.render_gerber(gerber):
    for primitive in layer.stroked():
        print(primitive.line_width, len(primitive.path.elements))
```

## What it does not do

- **No file parsing.** The package has no parser that reads a Gerber file
  into a `Gerber`. `GerberFile` only scans characters and numbers. Levels
  and plotters are built by the caller, as in the example above.
- **No macro interpreter.** The package cannot interpret aperture macro
  definitions. `MacroAperture` needs a macro object supplied by the caller.
- **No raster output.** Nothing is written to image files.
  `PathEngine.render_gerber` returns vector paths and colours for another
  library to paint.
- **No command-line tool and no viewer window.**