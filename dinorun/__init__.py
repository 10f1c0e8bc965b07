"""Engine-free platformer logic: tile maps, grid searches, animation, fonts, fades and scene flow."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "animation",
    "dynarray",
    "linkedlist",
    "sstring",
    "timer",
    "tilemap",
    "mapsearch",
    "pathfinding",
    "fonts",
    "fade",
    "render",
    "scenes",
    "parallax",
]