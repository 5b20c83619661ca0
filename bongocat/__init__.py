"""Always-on-top cat that taps along with key presses and keeps a persistent count."""

__version__ = "0.1.0"