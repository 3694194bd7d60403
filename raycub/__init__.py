"""Grid-based raycasting explorer for .cub scene files: parsing, ray casting, rendering and a pygame front end."""

__version__ = "0.1.0"