#!/usr/bin/env python3
"""
wangfill - Fill Demo

Builds a complete Wang set, paints a base layer with one uniform color,
fills a rectangle inside it and prints the resulting tile grid. Optionally
writes a PNG preview of the Wang colors.
"""

import argparse
import logging
import random
import sys

from wangfill.algorithms.wang_filler import WangFiller
from wangfill.core.geometry import StaggeredGrid
from wangfill.core.region import Rect, Region
from wangfill.core.tile_layer import Cell, TileLayer
from wangfill.core.wang_set import WangSet, build_complete_wang_set


def uniform_tile_id(wang_set: WangSet, color: int) -> int | None:
    """Find the tile showing `color` in every slot kind the set uses."""
    for tile in wang_set.wang_tiles:
        colors = set(tile.wang_id.colors) - {0}
        if colors == {color}:
            return tile.tile_id
    return None


def paint_base(width: int, height: int, tile_id: int | None) -> TileLayer:
    layer = TileLayer(width, height)
    if tile_id is not None:
        layer.tiles[:, :] = tile_id
    return layer


def format_layer(layer: TileLayer) -> str:
    lines = []
    for row in layer.tile_ids():
        lines.append(" ".join("  ." if t < 0 else f"{t:3d}" for t in row))
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(
        description="Fill a rectangle of a map with Wang tiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Two edge colors, 4x4 hole in a grass map:
    fill_demo.py --edge-colors 1 2 --border-color 1 --region 2 2 4 4

  Mixed set, reproducible, with preview:
    fill_demo.py --edge-colors 1 2 --corner-colors 1 2 --seed 7 -o fill.png
        """,
    )
    parser.add_argument("--width", type=int, default=8, help="Map width (default: 8)")
    parser.add_argument("--height", type=int, default=8, help="Map height (default: 8)")
    parser.add_argument(
        "--region",
        type=int,
        nargs=4,
        metavar=("X", "Y", "W", "H"),
        default=(2, 2, 4, 4),
        help="Rectangle to fill (default: 2 2 4 4)",
    )
    parser.add_argument(
        "--edge-colors", type=int, nargs="*", default=[1, 2], help="Edge colors"
    )
    parser.add_argument(
        "--corner-colors", type=int, nargs="*", default=[], help="Corner colors"
    )
    parser.add_argument(
        "--border-color",
        type=int,
        help="Paint the map with this uniform color before filling",
    )
    parser.add_argument(
        "--stagger-axis",
        choices=["x", "y"],
        help="Treat the map as staggered along this axis",
    )
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument(
        "-o", "--output", help="Write a PNG preview of the Wang colors"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log per-cell details"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.edge_colors and not args.corner_colors:
        print("Error: at least one edge or corner color is required")
        sys.exit(1)

    try:
        wang_set = build_complete_wang_set(
            "demo", args.edge_colors, args.corner_colors
        )
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    border_tile = None
    if args.border_color is not None:
        border_tile = uniform_tile_id(wang_set, args.border_color)
        if border_tile is None:
            print(f"Error: no uniform tile for color {args.border_color}")
            sys.exit(1)

    back = paint_base(args.width, args.height, border_tile)
    target = back.clone()

    x, y, w, h = args.region
    try:
        region = Region([Rect(x, y, w, h)])
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    for point in region.points():
        if not target.contains(point):
            print(f"Error: region {args.region} does not fit in the map")
            sys.exit(1)

    staggered_grid = StaggeredGrid(args.stagger_axis) if args.stagger_axis else None
    rng = random.Random(args.seed)
    filler = WangFiller(wang_set, staggered_grid=staggered_grid, rng=rng, debug=True)

    for point in region.points():
        target.set_cell(point, Cell())
    stats = filler.fill_region(target, back, region)

    print(f"{wang_set!r}, complete={wang_set.is_complete}")
    print(format_layer(target))
    if stats.unfilled:
        print(f"Unfilled cells: {stats.unfilled}")

    if args.output:
        from wangfill.rendering.pil_renderer import render_wang_layer

        img = render_wang_layer(target, wang_set)
        img.save(args.output)
        print(f"Saved: {args.output} ({img.width}x{img.height})")


if __name__ == "__main__":
    main()
