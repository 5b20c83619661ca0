"""Watching keyboard devices for key presses."""

from __future__ import annotations

import struct
import sys
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

INPUT_DIR = Path("/dev/input")

EVENT_FORMAT = "llHHi"
EVENT_SIZE = struct.calcsize(EVENT_FORMAT)

EV_KEY = 0x01
KEY_A = 30
KEY_MAX = 0x2FF
KEY_PRESS = 1


@dataclass(frozen=True)
class KeyEvent:
    """A key event read from an input device."""

    seconds: int
    microseconds: int
    code: int
    value: int

    @property
    def is_press(self) -> bool:
        return self.value == KEY_PRESS


def _read_records(stream: BinaryIO) -> Iterator[bytes]:
    pending = b""
    while True:
        chunk = stream.read(EVENT_SIZE - len(pending))
        if not chunk:
            return
        pending += chunk
        if len(pending) == EVENT_SIZE:
            yield pending
            pending = b""


def iter_key_events(stream: BinaryIO) -> Iterator[KeyEvent]:
    """Yield the key events in a stream of raw input events."""
    for record in _read_records(stream):
        sec, usec, ev_type, code, value = struct.unpack(EVENT_FORMAT, record)
        if ev_type == EV_KEY:
            yield KeyEvent(sec, usec, code, value)


def iter_key_presses(stream: BinaryIO) -> Iterator[KeyEvent]:
    """Yield only the key-down events of a stream."""
    return (event for event in iter_key_events(stream) if event.is_press)


def _ioc_read(ev_type: int, number: int, size: int) -> int:
    read_dir = 2
    return (read_dir << 30) | (size << 16) | (ord("E") << 8) | number


def _has_key(bitmap: bytes, code: int) -> bool:
    index, bit = divmod(code, 8)
    return index < len(bitmap) and bool(bitmap[index] & (1 << bit))


def is_keyboard(device_path: str | Path) -> bool:
    """Tell whether the device at the path reports the A key."""
    try:
        import fcntl
    except ImportError:
        return False
    size = KEY_MAX // 8 + 1
    request = _ioc_read(EV_KEY, 0x20 + EV_KEY, size)
    try:
        with open(device_path, "rb", buffering=0) as device:
            bitmap = fcntl.ioctl(device.fileno(), request, bytes(size))
    except OSError:
        return False
    return _has_key(bitmap, KEY_A)


def keyboard_devices(input_dir: str | Path = INPUT_DIR) -> list[Path]:
    """List the event devices in a directory that look like keyboards."""
    try:
        entries = sorted(Path(input_dir).iterdir())
    except OSError:
        return []
    return [
        path
        for path in entries
        if path.name.startswith("event") and is_keyboard(path)
    ]


def _listen(device_path: Path, notify: Callable[[], None]) -> None:
    try:
        device = open(device_path, "rb", buffering=0)
    except OSError as exc:
        print(
            f"Failed to open device {device_path}: {exc}. "
            "Add your user to the 'input' group.",
            file=sys.stderr,
        )
        return
    with device:
        try:
            for _ in iter_key_presses(device):
                notify()
        except OSError as exc:
            print(f"Error reading events from {device_path}: {exc}", file=sys.stderr)


def start_input_monitoring(
    notify: Callable[[], None], input_dir: str | Path = INPUT_DIR
) -> list[threading.Thread]:
    """Start one listener thread per keyboard; notify is called on each press."""
    threads = []
    for path in keyboard_devices(input_dir):
        thread = threading.Thread(
            target=_listen, args=(path, notify), name=f"keys-{path.name}", daemon=True
        )
        thread.start()
        threads.append(thread)
    return threads