"""chromegen — Chrome extension generator for plugin contributions."""

__version__ = "0.1.0"
