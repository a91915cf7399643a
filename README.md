# zenithengine

The core of a small 2D game engine, written as plain Python on top of
`numpy` and Pillow. It keeps input state, runs an application loop, and
turns sprites, images and text into batches of vertex data that a graphics
backend can upload and draw.

## What is in it

| Module | Contents |
| --- | --- |
| `zenithengine.keys` | `Key` and `MouseButton` code enums |
| `zenithengine.keyboard` | `Keyboard`, `KeyEvent`, `KeyEventType`: held keys, "just pressed" keys, bounded queues of key and character events (16 each) |
| `zenithengine.mouse` | `Mouse`, `MouseEvent`, `MouseEventType`: cursor position, buttons, enter/leave, wheel notches of 120 units |
| `zenithengine.events` | `EventListener`, a base class with one `on_...` hook per window, key and mouse notification |
| `zenithengine.window` | `Window`, `WindowEvent`, `EventKind`, `SizeState`: a window model fed with events by `Window.post` and applied by `Window.process_events` |
| `zenithengine.app` | `ZenithApp`, `run_application`, `quit_application`, `running_application`, `return_value` |
| `zenithengine.input` | module-level polling of the keyboard and mouse of one window chosen with `setup_event_window` |
| `zenithengine.timing` | `update`, `delta`, `elapsed` frame clock |
| `zenithengine.viewport` | `Viewport` with `aspect_ratio` and `set_dimensions` |
| `zenithengine.camera` | `Camera` (orthographic), `ortho`, `model_matrix` |
| `zenithengine.texture` | `Texture2D`, `Filter`, `Wrap`, `white_texture`, `texture_from_memory`, `load_texture` |
| `zenithengine.batch_renderer` | `BatchRenderer`, `Batch`, `Vertex`, `quad_indices` |
| `zenithengine.font` | `Font`, `Glyph`, `load_font` (TrueType fonts rendered through Pillow) |
| `zenithengine.ui_renderer` | `UIRenderer`, `Anchor`, `UILayer`: images and text in window pixels, placed by anchor and pivot |
| `zenithengine.stats` | `RendererStats` and the shared `default_stats` counters |
| `zenithengine.exceptions` | `ZenithError`, `ResourceNotFoundError`, `InitializationError` |
| `zenithengine.fileio` | `read_text`, `read_binary`, `write_binary`, `CannotOpenFileError`, `CannotWriteFileError` |
| `zenithengine.flappy` | `Background`, `Bird`, `Pipe`: the game objects of a side-scrolling bird game |

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## A minimal application

```python
from zenithengine import input as zinput
from zenithengine.app import ZenithApp, quit_application, return_value, run_application
from zenithengine.batch_renderer import BatchRenderer
from zenithengine.camera import Camera
from zenithengine.keys import Key
from zenithengine.texture import white_texture
from zenithengine.viewport import Viewport
from zenithengine.window import EventKind, Window, WindowEvent


class Demo(ZenithApp):
    def start(self):
        super().start()
        self.window = Window(1280, 720, "Demo", False)
        self.window.show()
        zinput.setup_event_window(self.window)
        self.camera = Camera(Viewport(0, 0, 1280, 720))
        self.renderer = BatchRenderer()
        self.texture = white_texture()
        self.frames = 0

    def update(self):
        super().update()
        self.camera.update()
        self.renderer.begin(self.camera.combined)
        self.renderer.draw_texture(self.texture, (0.0, 0.0, 0.0), (1.0, 1.0, 0.0), 0.0, (1, 1, 1, 1))
        batch = self.renderer.end()  # batch.vertices, batch.indices, batch.textures

        self.frames += 1
        if self.frames == 3:
            # Stands in for a platform layer reporting a key press.
            self.window.post(WindowEvent(EventKind.KEY_DOWN, key=Key.ESCAPE))
        self.window.process_events()
        if zinput.is_key_just_pressed(Key.ESCAPE):
            quit_application(0)


run_application(Demo())
print(return_value())  # 0
```

`run_application` calls `start` once, then `update` every frame, and resets
`stats.default_stats` after each frame until `quit_application` is called
(a `CLOSE` or `QUIT` window event calls it too).

## Rendering output

`BatchRenderer.end` returns a `Batch`: a tuple of `Vertex` records (position,
color, texture coordinates, texture slot), the textures bound to its slots,
the view-projection matrix, and `indices`, a `numpy` `uint16` array of two
triangles per quad. A batch is also closed automatically when it reaches
`quads_per_batch` quads or runs out of texture slots; pass `on_flush` to
receive every batch. `UIRenderer` works the same way, with a separate text
and image layer and a pixel-space orthographic projection.

## Errors

Every engine error derives from `zenithengine.exceptions.ZenithError` and
records the file and line it was raised from. Its message lists the error's
type name, its details (such as `[Missing File] ...`), then `[File]` and
`[Line]`. Missing files, images and fonts raise `ResourceNotFoundError`;
`write_binary` raises `CannotOpenFileError` or `CannotWriteFileError`.

## What it does not do

- It opens no window on screen and reads no input from the operating
  system; a `Window` only reacts to the `WindowEvent`s posted to it.
- It does not draw to a GPU. Renderers stop at vertex, index and texture
  data.
- It plays no sound. `Bird` accepts an `on_flap` callback where a sound
  would be started.
- It installs no command; it is a library.

## Running the tests

```
pytest
```