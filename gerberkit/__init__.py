"""Gerber artwork model: apertures, levels, plotter state and vector path rendering."""

__version__ = "0.1.0"

__all__ = [
    "aperture_level",
    "apertures",
    "bound_box",
    "commands",
    "engine",
    "gerber",
    "gerber_level",
    "paths",
    "plotter",
    "scanner",
    "strokes",
    "transformation",
]