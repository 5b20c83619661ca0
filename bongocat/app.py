"""The application: counter state, database writer and the main loop."""

from __future__ import annotations

import argparse
import queue
import sys
import threading
from pathlib import Path

from bongocat import config, database, input as key_input
from bongocat.animation import Animator
from bongocat.ui import AssetPaths, BongoWindow

_POLL_MS = 10
_STOP = object()


class BongoCatApp:
    """Counts key presses, persists the count and drives the overlay."""

    def __init__(self, db_path: str | Path | None = None) -> None:
        self._db_path = config.db_path() if db_path is None else Path(db_path)
        self._count = 0
        self._lock = threading.Lock()
        self._writes: queue.SimpleQueue[object] = queue.SimpleQueue()
        self._writer: threading.Thread | None = None

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    def initialize(self) -> int:
        """Prepare the database and load the stored count."""
        conn = database.connect(self._db_path)
        try:
            database.initialize_schema(conn)
            initial = database.read_counter(conn) or 0
        finally:
            conn.close()
        with self._lock:
            self._count = initial
        return initial

    def _ensure_writer(self) -> None:
        if self._writer is None:
            self._writer = threading.Thread(
                target=self._write_loop, name="counter-writer", daemon=True
            )
            self._writer.start()

    def _write_loop(self) -> None:
        try:
            conn = database.connect(self._db_path)
        except Exception as exc:
            print(f"Failed to connect to database: {exc}", file=sys.stderr)
            return
        with conn:
            while (item := self._writes.get()) is not _STOP:
                try:
                    database.write_counter(conn, item)
                except Exception as exc:
                    print(f"Database write error: {exc}", file=sys.stderr)
        conn.close()

    def record_key_press(self) -> int:
        """Count one press, queue it for storage and return the new count."""
        with self._lock:
            self._count += 1
            new_count = self._count
        self._ensure_writer()
        self._writes.put(new_count)
        return new_count

    def close(self) -> None:
        """Flush pending writes and stop the writer thread."""
        if self._writer is not None:
            self._writes.put(_STOP)
            self._writer.join()
            self._writer = None

    def run(self) -> None:
        """Open the overlay and animate it on every key press until closed."""
        import tkinter as tk

        self._ensure_writer()
        try:
            root = tk.Tk(className=config.APP_ID)
            root.withdraw()
            assets = AssetPaths.load()
            window = BongoWindow(root, assets, self.count)
            animator = Animator(assets, root.after)

            presses: queue.SimpleQueue[None] = queue.SimpleQueue()
            key_input.start_input_monitoring(lambda: presses.put(None))

            def drain() -> None:
                while True:
                    try:
                        presses.get_nowait()
                    except queue.Empty:
                        break
                    animator.animate(window)
                    window.update_counter(self.record_key_press())
                root.after(_POLL_MS, drain)

            root.after(_POLL_MS, drain)
            root.mainloop()
        finally:
            self.close()


def main(argv: list[str] | None = None) -> int:
    """Start the overlay."""
    parser = argparse.ArgumentParser(
        prog="bongo-cat", description="A cat that taps along with your keyboard."
    )
    parser.parse_args(argv)
    app = BongoCatApp()
    try:
        app.initialize()
        app.run()
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())