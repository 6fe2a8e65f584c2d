"""Read, validate and open .cub levels with XPM wall textures."""

__version__ = "0.1.0"
__all__ = ["colors", "pixels", "xpm", "reader", "parser", "game"]