"""Renderers for layout kinds (row, column, container, section).

Each boxed layout node is nested as

    outer table > outer cell (background, radius, clip)
        > border table (borders, non-collapsed) > padding cell
            > content table (children and gap spacers)

The border table is skipped when the node has neither border nor radius;
the padding declarations then move onto the outer cell.
"""

from src.align import to_horizontal, to_vertical
from src.distribution import plan_widths
from src.gap import STACK_CELL_CLASS, has_gap, horizontal_cells, vertical_rows
from src.markup import (
    Element,
    Node,
    layout_table,
    single_cell_table,
    table_cell,
    table_row,
)
from src.mid import ColumnConfig, ContainerConfig, RowConfig, SectionConfig
from src.schema import NodeKind, WidthType
from src.style import LayerStyles, resolve_layers
from src.units import format_number, format_px, html_length

from .lib import RenderOptions, register_renderer

FIXED_WIDTH_CLASS = "container-fixed-width"

_COLLAPSED_TABLE = {"width": "100%", "border-collapse": "collapse"}


def rendered(children: list[Element | None]) -> list[Element]:
    """Children that produced markup, in order."""
    return [child for child in children if child is not None]


def layered_cell(
    layers: LayerStyles,
    *content: Node,
    label: str,
    outer_attrs: dict | None = None,
    inner_attrs: dict | None = None,
) -> Element:
    """Build the outer cell holding the border and padding layers."""
    if layers.has_border_layer:
        padding_cell = table_cell(*content, attrs=inner_attrs, style=layers.padding)
        border_table = layout_table(
            table_row(padding_cell), label=f"{label} | Border", style=layers.border
        )
        return table_cell(border_table, attrs=outer_attrs, style=layers.outer)
    attrs = {**(outer_attrs or {}), **(inner_attrs or {})}
    return table_cell(*content, attrs=attrs, style=layers.collapsed_outer())


@register_renderer(NodeKind.CONTAINER)
def render_container(
    config: ContainerConfig, children: list[Element | None], options: RenderOptions
) -> Element:
    """Distribute the container's pixel width among side-by-side children.

    A child that renders nothing keeps its (empty) width cell.
    """
    plan = plan_widths(config, len(children), options.canvas_width)
    fixed = config.width_type == WidthType.FIXED.value
    valign = to_vertical(config.align_items)
    align = to_horizontal(config.justify_content, default="center")
    stacking = config.should_wrap and len(children) > 1
    max_width = (config.width or format_px(plan.container_width)) if fixed else None

    cells = [
        table_cell(
            *rendered([child]),
            attrs={
                "class": STACK_CELL_CLASS if stacking else None,
                "width": html_length(width),
            },
            style={"width": width, "vertical-align": valign, "text-align": "left"},
        )
        for child, width in zip(children, plan.widths)
    ]

    layers = resolve_layers(
        config,
        vertical_align=valign,
        outer={"max-width": max_width},
        content={"height": config.height},
    )
    content = layout_table(
        table_row(*horizontal_cells(cells, config.gap, stacking)),
        label="Container | Content",
        style=layers.content,
    )
    middle = layout_table(
        table_row(layered_cell(layers, content, label="Container")),
        label="Container | Middle",
        style={"width": "100%", "max-width": max_width, "border-collapse": "collapse"},
        attrs={
            "class": FIXED_WIDTH_CLASS if fixed else None,
            "align": align,
            "width": format_number(plan.container_width) if fixed else None,
        },
    )
    return single_cell_table(
        middle,
        label="Container",
        table_style=_COLLAPSED_TABLE,
        cell_attrs={"align": align},
    )


@register_renderer(NodeKind.ROW)
def render_row(
    config: RowConfig, children: list[Element | None], options: RenderOptions
) -> Element:
    """Place children side by side in an auto-width, justified table."""
    children = rendered(children)
    valign = to_vertical(config.align_items)
    align = to_horizontal(config.justify_content)
    stacking = config.should_wrap and len(children) > 1
    height_attr = html_length(config.height)

    cells = [
        table_cell(
            child,
            attrs={"class": STACK_CELL_CLASS if stacking else None, "valign": valign},
            style={
                "vertical-align": valign,
                "text-align": "left",
                "padding": "0",
                "margin": "0",
            },
        )
        for child in children
    ]
    content = layout_table(
        table_row(*horizontal_cells(cells, config.gap, stacking)),
        label="Row | Content",
        style={
            "width": "auto",
            "height": config.height,
            "border-collapse": "collapse",
            "min-width": "1px",
            "max-width": config.width or "100%",
        },
        attrs={"height": height_attr},
    )
    justified = single_cell_table(
        content,
        label="Row | Justification",
        table_style=_COLLAPSED_TABLE,
        cell_attrs={"align": align},
    )
    layers = resolve_layers(
        config, outer={"width": config.width or "100%", "height": config.height}
    )
    return layout_table(
        table_row(
            layered_cell(
                layers, justified, label="Row", outer_attrs={"height": height_attr}
            )
        ),
        label="Row",
        style={
            "width": config.width or "100%",
            "height": config.height,
            "border-collapse": "collapse",
        },
        attrs={"height": height_attr},
    )


@register_renderer(NodeKind.COLUMN)
def render_column(
    config: ColumnConfig, children: list[Element | None], options: RenderOptions
) -> Element:
    """Stack children top to bottom inside one cell."""
    children = rendered(children)
    halign = to_horizontal(config.align_items)
    valign = to_vertical(config.justify_content)
    height_attr = html_length(config.height)

    content: tuple[Node, ...] = tuple(children)
    if has_gap(config.gap) and len(children) > 1:
        rows = [
            table_row(
                table_cell(child, style={"vertical-align": "top", "text-align": "left"})
            )
            for child in children
        ]
        content = (
            layout_table(
                *vertical_rows(rows, config.gap),
                label="Column | Gap",
                style=_COLLAPSED_TABLE,
            ),
        )

    layers = resolve_layers(
        config,
        vertical_align=valign,
        outer={"width": config.width, "height": config.height},
    )
    cell = layered_cell(
        layers,
        *content,
        label="Column",
        outer_attrs={"width": html_length(config.width), "height": height_attr},
        inner_attrs={"valign": valign, "align": halign},
    )
    return layout_table(
        table_row(cell),
        label="Column",
        style={**_COLLAPSED_TABLE, "height": config.height},
        attrs={"height": height_attr},
    )


@register_renderer(NodeKind.SECTION)
def render_section(
    config: SectionConfig, children: list[Element | None], options: RenderOptions
) -> Element:
    """Full-width header, content or footer band with stacked children."""
    children = rendered(children)
    label = f"Section | {config.section_type}"
    content: tuple[Node, ...] = ()
    if children:
        rows = [table_row(table_cell(child)) for child in children]
        content = (
            layout_table(
                *vertical_rows(rows, config.gap),
                label=f"{label} | Content",
                style=_COLLAPSED_TABLE,
            ),
        )
    layers = resolve_layers(config)
    return layout_table(
        table_row(layered_cell(layers, *content, label=label)),
        label=label,
        style=_COLLAPSED_TABLE,
    )


__all__ = [
    "FIXED_WIDTH_CLASS",
    "rendered",
    "layered_cell",
    "render_container",
    "render_row",
    "render_column",
    "render_section",
]
