"""Tiled (TMX) tile maps: tilesets, layers, properties and checkpoints."""

from __future__ import annotations

import enum
import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .geometry import Point, Rect

log = logging.getLogger(__name__)

# Index of the layer that holds collision tiles.
COLLISION_LAYER = 2
# Index of the tileset whose third tile marks a checkpoint.
CHECKPOINT_TILESET = 2
# Index of the tileset that holds collectables.
COLLECTABLE_TILESET = 3


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder matching truncating division."""
    return a - b * _tdiv(a, b)


def _int_attr(element: ET.Element, name: str, default: int = 0) -> int:
    value = element.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


class MapType(enum.IntEnum):
    """Map orientation."""

    UNKNOWN = 0
    ORTHOGONAL = 1
    ISOMETRIC = 2
    STAGGERED = 3

    @classmethod
    def from_orientation(cls, orientation: str | None) -> MapType:
        return {
            "orthogonal": cls.ORTHOGONAL,
            "isometric": cls.ISOMETRIC,
            "staggered": cls.STAGGERED,
        }.get(orientation or "", cls.UNKNOWN)


@dataclass
class TileSet:
    """A tileset: a grid of tiles cut from one image."""

    name: str = ""
    firstgid: int = 0
    tile_width: int = 0
    tile_height: int = 0
    spacing: int = 0
    margin: int = 0
    columns: int = 1
    tilecount: int = 0
    image_source: str = ""
    tex_width: int = 0
    tex_height: int = 0
    offset_x: int = 0
    offset_y: int = 0

    @property
    def num_tiles_width(self) -> int:
        return self.columns

    @property
    def num_tiles_height(self) -> int:
        return _tdiv(self.tilecount, self.columns)

    def contains(self, tile_id: int) -> bool:
        return self.firstgid <= tile_id < self.firstgid + self.tilecount

    def tile_rect(self, tile_id: int) -> Rect:
        """The rectangle of a tile inside the tileset image."""
        relative = tile_id - self.firstgid
        w, h = self.tile_width, self.tile_height
        return Rect(
            self.margin + (w + self.spacing) * _tmod(relative, self.columns),
            self.margin + (h + self.spacing) * _tdiv(relative, self.columns),
            w,
            h,
        )


@dataclass
class Properties:
    """Named integer properties attached to a layer."""

    values: dict[str, int] = field(default_factory=dict)

    def get(self, name: str, default: int = 0) -> int:
        """The value of ``name``, or ``default`` when it is not set."""
        return self.values.get(name, default)


@dataclass
class MapLayer:
    """One layer of tile ids, stored row by row."""

    name: str = ""
    width: int = 0
    height: int = 0
    map_width: int = 0
    map_height: int = 0
    data: list[int] = field(default_factory=list)
    properties: Properties = field(default_factory=Properties)

    def get(self, x: int, y: int) -> int:
        """The tile id at (x, y), or 0 outside the layer."""
        if 0 <= x <= self.map_width and 0 <= y <= self.map_height:
            index = y * self.width + x
            if 0 <= index < len(self.data):
                return self.data[index]
        return 0


@dataclass
class CheckPoint:
    """A checkpoint tile; active once the player has reached it."""

    pos: Point
    active: bool = False


@dataclass
class TileMap:
    """A loaded map with its tilesets, layers and checkpoints."""

    width: int = 0
    height: int = 0
    tile_width: int = 0
    tile_height: int = 0
    type: MapType = MapType.UNKNOWN
    tilesets: list[TileSet] = field(default_factory=list)
    layers: list[MapLayer] = field(default_factory=list)
    checkpoints: list[CheckPoint] = field(default_factory=list)

    def _cells(self) -> Iterator[tuple[MapLayer, int, int, int]]:
        for layer in self.layers:
            for y in range(self.height):
                for x in range(self.width):
                    yield layer, x, y, layer.get(x, y)

    def map_to_world(self, x: int, y: int) -> Point:
        """Translate map coordinates to world coordinates."""
        if self.type == MapType.ORTHOGONAL:
            return Point(x * self.tile_width, y * self.tile_height)
        if self.type == MapType.ISOMETRIC:
            return Point(
                (x - y) * _tdiv(self.tile_width, 2),
                (x + y) * _tdiv(self.tile_height, 2),
            )
        log.warning("Unknown map type")
        return Point(x, y)

    def world_to_map(self, x: int | Point, y: int | None = None) -> Point:
        """Translate world coordinates (or a world Point) to map coordinates."""
        if y is None:
            if not isinstance(x, Point):
                raise TypeError("world_to_map needs x and y, or a Point")
            x, y = x.x, x.y
        if self.type == MapType.ORTHOGONAL:
            return Point(_tdiv(x, self.tile_width), _tdiv(y, self.tile_height))
        if self.type == MapType.ISOMETRIC:
            half_w = self.tile_width * 0.5
            half_h = self.tile_height * 0.5
            return Point(
                int((x / half_w + y / half_h) / 2),
                int((y / half_h - x / half_w) / 2),
            )
        log.warning("Unknown map type")
        return Point(x, y)

    def tileset_for(self, tile_id: int) -> TileSet:
        """The tileset that holds ``tile_id``."""
        for tileset in self.tilesets:
            if tileset.contains(tile_id):
                return tileset
        raise LookupError(f"no tileset holds tile id {tile_id}")

    def movement_cost(self, x: int, y: int) -> int:
        """Cost of entering a tile: 1, 3, 0 for blocked, -1 outside the map."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return -1
        if len(self.layers) <= COLLISION_LAYER:
            raise LookupError("map has no collision layer")
        tile_id = self.layers[COLLISION_LAYER].get(x, y)
        if tile_id == 0:
            return 1
        first = self.tileset_for(tile_id).firstgid
        return {first: 1, first + 1: 0, first + 2: 3}.get(tile_id, -1)

    def walkability_map(self) -> tuple[int, int, bytes] | None:
        """Width, height and walkability bytes of the first "Nodraw" layer.

        Returns None when no layer carries a non-zero "Nodraw" property.
        """
        for layer in self.layers:
            if layer.properties.get("Nodraw", 0) == 0:
                continue
            cells = bytearray(b"\x01" * (layer.width * layer.height))
            for y in range(self.height):
                for x in range(self.width):
                    tile_id = layer.get(x, y)
                    if tile_id > 0:
                        tileset = self.tileset_for(tile_id)
                        cells[y * layer.width + x] = 0 if tile_id - tileset.firstgid > 0 else 1
            return self.width, self.height, bytes(cells)
        return None

    def activate_checkpoint(self, position: Point) -> None:
        """Mark every checkpoint at ``position`` as active."""
        for checkpoint in self.checkpoints:
            if checkpoint.pos == position:
                checkpoint.active = True

    def collectables(self) -> list[tuple[str, Point]]:
        """Coins and extra lives placed on the map, as (kind, position)."""
        if len(self.tilesets) <= COLLECTABLE_TILESET:
            raise LookupError("map has no collectables tileset")
        first = self.tilesets[COLLECTABLE_TILESET].firstgid
        found = []
        for _, x, y, tile_id in self._cells():
            if tile_id == first:
                found.append(("coin", Point(x, y)))
            if tile_id == first + 3:
                found.append(("live", Point(x, y)))
        return found

    def dimensions(self) -> Point:
        """Tile width and height."""
        return Point(self.tile_width, self.tile_height)

    def _find_checkpoints(self) -> list[CheckPoint]:
        if len(self.tilesets) <= CHECKPOINT_TILESET:
            return []
        marker = self.tilesets[CHECKPOINT_TILESET].firstgid + 2
        return [CheckPoint(Point(x, y)) for _, x, y, tile_id in self._cells() if tile_id == marker]


def _parse_tileset(node: ET.Element) -> TileSet:
    tileset = TileSet(
        name=node.get("name", ""),
        firstgid=_int_attr(node, "firstgid"),
        tile_width=_int_attr(node, "tilewidth"),
        tile_height=_int_attr(node, "tileheight"),
        spacing=_int_attr(node, "spacing"),
        margin=_int_attr(node, "margin"),
        columns=_int_attr(node, "columns", 1),
        tilecount=_int_attr(node, "tilecount"),
    )
    image = node.find("image")
    if image is not None:
        tileset.image_source = image.get("source", "")
        tileset.tex_width = _int_attr(image, "width")
        tileset.tex_height = _int_attr(image, "height")
    return tileset


def _parse_properties(node: ET.Element) -> Properties:
    values: dict[str, int] = {}
    for prop in node.findall("property"):
        values.setdefault(prop.get("name", ""), _int_attr(prop, "value"))
    return Properties(values)


def _parse_layer(node: ET.Element, tilemap: TileMap) -> MapLayer:
    layer = MapLayer(
        name=node.get("name", ""),
        width=_int_attr(node, "width"),
        height=_int_attr(node, "height"),
        map_width=tilemap.width * tilemap.tile_width,
        map_height=tilemap.height * tilemap.tile_width,
    )
    size = max(layer.width * layer.height, 0)
    data_node = node.find("data")
    tiles = data_node.findall("tile") if data_node is not None else []
    gids = [max(_int_attr(tile, "gid"), 0) for tile in tiles[:size]]
    layer.data = gids + [0] * (size - len(gids))
    for props in node.findall("properties"):
        layer.properties = _parse_properties(props)
    return layer


def parse_map(text: str) -> TileMap:
    """Build a TileMap from TMX text."""
    root = ET.fromstring(text)
    if root.tag != "map":
        raise ValueError("Error parsing map xml file: Cannot find 'map' tag.")

    tilemap = TileMap(
        width=_int_attr(root, "width"),
        height=_int_attr(root, "height"),
        tile_width=_int_attr(root, "tilewidth"),
        tile_height=_int_attr(root, "tileheight"),
        type=MapType.from_orientation(root.get("orientation")),
    )

    for node in root.findall("tileset"):
        tilemap.tilesets.append(_parse_tileset(node))
        if node.find("image") is None:
            log.error("Error parsing tileset xml file: Cannot find 'image' tag.")
            break

    for node in root.findall("layer"):
        tilemap.layers.append(_parse_layer(node, tilemap))

    tilemap.checkpoints = tilemap._find_checkpoints()
    log.debug("Parsed map: %dx%d tiles of %dx%d", tilemap.width, tilemap.height,
              tilemap.tile_width, tilemap.tile_height)
    return tilemap


def load_map(path: str | Path) -> TileMap:
    """Read and parse a TMX file."""
    return parse_map(Path(path).read_text(encoding="utf-8"))