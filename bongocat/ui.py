"""The overlay window and the image assets it shows."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bongocat import config

WINDOW_TITLE = "bongo"


@dataclass(frozen=True)
class AssetPaths:
    """Locations of the three animation frames."""

    idle: Path
    hit_left: Path
    hit_right: Path

    @classmethod
    def load(cls, directory: str | Path | None = None) -> AssetPaths:
        """Locate the frames in a directory, by default the asset directory."""
        base = config.asset_dir() if directory is None else Path(directory)
        assets = cls(
            idle=base / config.IDLE_ASSET,
            hit_left=base / config.HIT_LEFT_ASSET,
            hit_right=base / config.HIT_RIGHT_ASSET,
        )
        for name, path in (
            ("idle", assets.idle),
            ("hit_left", assets.hit_left),
            ("hit_right", assets.hit_right),
        ):
            if not path.exists():
                raise FileNotFoundError(f"Asset not found: {name} at {path}")
        return assets


def overlay_geometry(
    width: int, height: int, screen_width: int, screen_height: int
) -> str:
    """Geometry string anchoring a window to the bottom-right screen corner."""
    x = max(0, screen_width - width - config.WINDOW_MARGIN_RIGHT)
    y = max(0, screen_height - height - config.WINDOW_MARGIN_BOTTOM)
    return f"{width}x{height}+{x}+{y}"


class BongoWindow:
    """Undecorated always-on-top window with a counter above the cat."""

    def __init__(self, root: Any, assets: AssetPaths, initial_count: int) -> None:
        import tkinter as tk

        self._root = root
        self._images: dict[Path, Any] = {}

        root.wm_title(WINDOW_TITLE)
        root.overrideredirect(True)
        root.attributes("-topmost", True)

        self.counter_label = tk.Label(root, text=str(initial_count))
        self.counter_label.pack()
        self.picture = tk.Label(root, image=self._image(assets.idle), borderwidth=0)
        self.picture.pack()

        root.update_idletasks()
        root.geometry(
            overlay_geometry(
                root.winfo_reqwidth(),
                root.winfo_reqheight(),
                root.winfo_screenwidth(),
                root.winfo_screenheight(),
            )
        )
        root.deiconify()

    def _image(self, path: Path) -> Any:
        image = self._images.get(path)
        if image is None:
            import tkinter as tk

            image = tk.PhotoImage(master=self._root, file=str(path))
            self._images[path] = image
        return image

    def show_image(self, path: Path) -> None:
        """Display the image file in the picture area."""
        self.picture.configure(image=self._image(path))

    def update_counter(self, count: int) -> None:
        """Show a new count above the cat."""
        self.counter_label.configure(text=str(count))