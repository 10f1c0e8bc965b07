"""Bitmap fonts: a lookup table of characters laid out in a texture grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .geometry import Point, Rect

log = logging.getLogger(__name__)

MAX_FONTS = 10
MAX_FONT_CHARS = 256
# Horizontal gap, in pixels, between two blitted glyphs.
GLYPH_GAP = 2


@dataclass
class Font:
    """A loaded bitmap font."""

    texture: Any
    table: str
    rows: int
    columns: int
    char_w: int
    char_h: int

    @property
    def total_length(self) -> int:
        return len(self.table)

    def glyph_index(self, char: str) -> int:
        """Position of ``char`` in the table; unknown characters map to 0."""
        index = self.table.find(char)
        return index if index >= 0 else 0


class FontBank:
    """A fixed number of font slots, addressed by integer id."""

    def __init__(self) -> None:
        self._fonts: list[Font | None] = [None] * MAX_FONTS

    def __getitem__(self, font_id: int) -> Font:
        return self._font(font_id)

    def _font(self, font_id: int) -> Font:
        if not 0 <= font_id < MAX_FONTS or self._fonts[font_id] is None:
            raise LookupError(f"no bitmap font with id {font_id}")
        return self._fonts[font_id]

    def load(self, texture: Any, characters: str, rows: int, image_w: int, image_h: int) -> int:
        """Register a font texture and return its id.

        ``characters`` lists the glyphs in the order they appear in the
        texture, ``rows`` is the number of glyph rows in it.
        """
        if texture is None or characters is None or rows <= 0:
            raise ValueError("Could not load font")
        if len(characters) >= MAX_FONT_CHARS:
            raise ValueError(f"Could not load font with characters '{characters}'")
        columns = len(characters) // rows
        if columns == 0:
            raise ValueError("font has fewer characters than rows")

        for font_id, slot in enumerate(self._fonts):
            if slot is None:
                break
        else:
            raise RuntimeError(f"Cannot load font. Array is full (max {MAX_FONTS}).")

        self._fonts[font_id] = Font(
            texture=texture,
            table=characters,
            rows=rows,
            columns=columns,
            char_w=image_w // columns,
            char_h=image_h // rows,
        )
        log.debug("Successfully loaded BMP font %d", font_id)
        return font_id

    def unload(self, font_id: int) -> Any:
        """Free a slot and return its texture; None when the slot was empty."""
        if 0 <= font_id < MAX_FONTS and self._fonts[font_id] is not None:
            texture = self._fonts[font_id].texture
            self._fonts[font_id] = None
            log.debug("Successfully Unloaded BMP font_id %d", font_id)
            return texture
        return None

    def glyph_rects(
        self, x: int, y: int, font_id: int, text: str, grey: bool = False
    ) -> list[tuple[Point, Rect]]:
        """Screen position and texture section of every glyph of ``text``.

        With ``grey`` the glyphs are taken from the grey rows of the texture.
        """
        if text is None:
            raise ValueError("no text to render")
        font = self._font(font_id)
        placed = []
        for char in text:
            index = font.glyph_index(char)
            section_x = font.char_w * (index % font.columns)
            section_y = font.char_h * (index // font.columns)
            if grey:
                section_y *= 3
                if section_y == 0:
                    section_y = font.char_h * 2
            placed.append((Point(x, y), Rect(section_x, section_y, font.char_w, font.char_h)))
            x += font.char_w + GLYPH_GAP
        return placed

    def clear(self) -> list[Any]:
        """Free every slot; returns the textures that were held."""
        log.debug("Freeing all fonts")
        textures = [font.texture for font in self._fonts if font is not None]
        self._fonts = [None] * MAX_FONTS
        return textures