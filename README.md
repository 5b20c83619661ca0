# bongocat

A small always-on-top cat that sits in the bottom-right corner of your screen
and slaps its paws every time you press a key. Every key press is counted, and
the count is kept across restarts.

## Requirements

- Linux: key presses are read from the event devices under `/dev/input`, and
  your user must be allowed to read them (usually by being in the `input` group).
- Python with `tkinter`, which draws the window. No other packages are needed.

## Installation

```
pip install .
```

## Assets

The cat is drawn from three PNG images, which must be in the asset directory:

- `idle.png`: the cat at rest
- `hit_left.png`: the left paw down
- `hit_right.png`: the right paw down

The asset directory is `$BONGO_ASSETS` if that variable is set. Otherwise it is
`bongo-cat` inside your user configuration directory: `$XDG_CONFIG_HOME` or
`~/.config` on Linux, for example `~/.config/bongo-cat`. The key-press count is
stored in `sqlite.db` in the same directory.

## Usage

```
bongocat
```

This opens an undecorated, always-on-top window placed 7 pixels from the right
edge and 93 pixels from the bottom edge of the screen, with the count above the
cat. Each key press shows one paw for 150 ms, the paws taking turns, left first,
and the count goes up by one. Only key-down events are counted, not repeats or
releases.

If an image is missing, or the database holds a count that cannot be read, the
command prints `Error: ...` and exits with status 1. The only option is `--help`.

## Using it as a library

```python
from bongocat.app import BongoCatApp
from bongocat.config import db_path

app = BongoCatApp(db_path())
count = app.initialize()        # the stored count, or 0
count = app.record_key_press()  # returns the new count and queues it for storage
app.close()                     # waits until pending writes are stored
```

The other modules can be used on their own:

- `bongocat.database`: `connect`, `initialize_schema`, `read_counter` and
  `write_counter`. The count is kept as text in row 1 of the `counter` table
  and may range from 0 to 2**128 - 1.
- `bongocat.input`: `keyboard_devices` lists the event devices that report an
  A key, `iter_key_events` and `iter_key_presses` decode raw event streams into
  `KeyEvent` values, and `start_input_monitoring` starts one daemon thread per
  keyboard that calls a function on each press.
- `bongocat.ui`: `AssetPaths.load` finds and checks the images,
  `overlay_geometry` works out the window placement, and `BongoWindow` is the
  Tk window.
- `bongocat.animation`: `Animator` alternates the paw images and schedules the
  return to idle through any `schedule(delay_ms, callback)` function, such as
  Tk's `after`.

## Limitations

- The window is a plain top-level Tk window. It is not a Wayland layer-shell
  overlay, so on some Wayland compositors it may not stay on top or in the
  corner.
- Keyboard detection needs `fcntl` and Linux input devices. Elsewhere no
  keyboards are found and the cat never moves.