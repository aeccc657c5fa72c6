"""Reading and writing world map files."""

from invasion.io.map_files import load_map, save_map, write_text

__all__ = [
    "load_map",
    "save_map",
    "write_text",
]
