# proto_engine

A small 2D game engine built on pygame. It opens a window and can clear it to black, draw white filled rectangles and present the frame. It measures the time between frames and reports the FPS. It can also cap the frame rate. Keyboard and mouse input is tracked frame by frame.

## Install

```
pip install .
```

## Demo

```
proto-engine
```

This opens an 800x600 window titled "Input Test" with a white square in it:

- **W**, **A**, **S** and **D** move the square at 300 pixels per second.
- **Space** prints `Jump!`.
- A left click prints `Click at (x, y)` with the last known mouse position.

Close the window to quit. The demo does not cap its frame rate. About once a second the engine prints the current FPS.

## Using the engine

```python
import pygame
from proto_engine.engine import Engine

with Engine(800, 600, "My Game") as engine:
    engine.set_target_fps(60)
    x = 100.0

    while engine.running:
        engine.update_delta_time()
        engine.poll_events()

        dt = engine.delta_time
        x += engine.input.get_axis(pygame.KSCAN_A, pygame.KSCAN_D) * 200 * dt

        engine.clear()
        engine.draw_rect(x, 100, 50, 50)
        engine.present()
        engine.limit_frame_rate()
```

`proto_engine.engine.Engine(width, height, title)` starts the pygame display and opens the window. If either step fails, it raises `EngineError`. It also accepts two keyword arguments:

- `clock`: a function returning seconds. The default is `time.perf_counter`.
- `sleep`: a function taking seconds. The default is `time.sleep`.

Members:

- `clear()` fills the window with black.
- `draw_rect(x, y, w, h)` fills a white rectangle. Its coordinates are truncated to integers.
- `present()` flips the display.
- `poll_events()` first ages the input state. It then feeds every pending pygame event to `input`. A quit event sets `running` to `False`.
- `update_delta_time()` sets `delta_time` to the seconds since the last frame. About once a second it updates `fps` and prints it.
- `set_target_fps(fps)` sets `target_fps`. A value of zero or less is rejected with a message on stderr, and 60 is used instead. This method also prints the old and new values.
- `limit_frame_rate()` sleeps off whatever remains of the target frame time, in whole milliseconds, and then measures `delta_time` again. While `target_fps` is 0, which is the default, it does nothing.
- `close()` shuts pygame down. It is safe to call more than once. Using the engine as a context manager calls `close()` on exit.
- `initialized` and `surface` are read-only properties. `running`, `delta_time`, `fps`, `target_fps` and `input` are plain attributes.

## Input states

`proto_engine.input.Input` tracks each key by its scancode (`event.scancode`, e.g. `pygame.KSCAN_SPACE`). It also tracks mouse buttons 0–4, which correspond to pygame buttons 1–5. Each key and button is in one of four `ButtonState` values:

| State | Meaning |
|---|---|
| `UP` | not held |
| `PRESSED` | went down this frame |
| `DOWN` | held |
| `RELEASED` | went up this frame |

At the start of each frame, `update()` moves every `PRESSED` state to `DOWN` and every `RELEASED` state to `UP`. A key-down event for a key that is already `DOWN` is ignored, so key repeat does not press the key again.

Queries:

- `key_state(key)` returns the key's state. A key that has never been seen is `UP`.
- `is_key_down`, `is_key_pressed` and `is_key_released` answer the same questions as booleans.
- `is_mouse_button_down`, `is_mouse_button_pressed` and `is_mouse_button_released` do the same for mouse buttons. A button outside 0–4 always gives `False`.
- `get_axis(negative, positive)` returns `-1.0`, `0.0` or `1.0`, depending on which of the two keys are held.
- `mouse_x` and `mouse_y` hold the last position reported by a mouse-motion event.

## Limits

The engine draws only black clears and white filled rectangles. It has no textures, text, sound, or choice of colour. Input covers keys, five mouse buttons and mouse position only. It does not handle mouse wheel, text entry or game controllers.

## Tests

```
pip install .[test]
pytest
```