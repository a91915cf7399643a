"""A small 2D game engine core: input state, window events, cameras and batched rendering."""

__version__ = "0.0.1"