from __future__ import annotations

from brickgame.shapes.registry import ShapeCatalog, ShapeDefinition

DEFAULT_SHAPES: tuple[ShapeDefinition, ...] = (
    ShapeDefinition(
        name="long_line",
        rows=("#", "#", "#", "#"),
        description="Straight line, four rows high.",
    ),
    ShapeDefinition(
        name="l_shape_left",
        rows=("###", "..#"),
        description="L brick with the foot on the right.",
    ),
    ShapeDefinition(
        name="l_shape_right",
        rows=("###", "#.."),
        description="L brick with the foot on the left.",
    ),
    ShapeDefinition(
        name="zigzag_shape_z",
        rows=("##.", ".##"),
        description="Z zig-zag.",
    ),
    ShapeDefinition(
        name="zigzag_shape_s",
        rows=(".##", "##."),
        description="S zig-zag.",
    ),
    ShapeDefinition(
        name="four_by_four",
        rows=("##", "##"),
        description="Two by two square.",
    ),
    ShapeDefinition(
        name="t_shape",
        rows=("###", ".#."),
        description="T brick.",
    ),
)


def create_default_catalog() -> ShapeCatalog:
    """Return a new catalog populated with the seven canonical bricks."""
    return ShapeCatalog(DEFAULT_SHAPES)
