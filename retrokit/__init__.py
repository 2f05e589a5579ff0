"""Building blocks for a retro 2D game engine: INI config, trig tables, palettes, data packs, input and mods."""

__version__ = "0.1.0"