"""Small arcade games, Pong parts and an in-memory 84x48 monochrome screen to draw them on."""

__version__ = "0.1.0"