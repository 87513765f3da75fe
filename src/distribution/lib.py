"""Width distribution engine.

Splits a container's pixel width among its children under one of three
strategies:

- equals: every child gets an equal share of the content space
- ratio: one main child gets ``numerator / denominator`` of the content
  space, the others split the rest evenly
- manual: the configured widths are used verbatim

Content space is the container width minus ``gap * (n - 1)``. Negative
content space is propagated as negative widths rather than clamped.
Invalid ratio or manual parameters fall back to equals.
"""

from dataclasses import dataclass

from src.core import get_logger
from src.mid import ChildrenConstraints, ContainerConfig
from src.schema import WidthDistribution, WidthType
from src.units import format_px, parse_px

logger = get_logger("mailframe.distribution")

DEFAULT_CANVAS_WIDTH = 600


def resolve_container_width(
    config: ContainerConfig, canvas_width: int = DEFAULT_CANVAS_WIDTH
) -> float:
    """Pixel width of a container.

    Only a fixed container with a pixel-valued width uses its own width;
    everything else resolves to the canvas width.
    """
    if config.width_type == WidthType.FIXED.value:
        width = parse_px(config.width)
        if width is not None:
            return width
    return float(canvas_width)


def resolve_gap(gap: str | None) -> float:
    """Pixel gap; non-pixel or absent gaps resolve to 0."""
    value = parse_px(gap)
    return value if value is not None else 0.0


def content_space(container_width: float, gap: float, child_count: int) -> float:
    """Width left for children once gaps are subtracted."""
    return container_width - gap * max(child_count - 1, 0)


def _equals(remaining: float, child_count: int) -> list[str]:
    return [format_px(remaining / child_count)] * child_count


def ratio_is_valid(constraint: ChildrenConstraints, child_count: int) -> bool:
    """Whether a ratio constraint can be applied to ``child_count`` children."""
    ratio = constraint.ratio
    if ratio is None or child_count < 2:
        return False
    if not 0 <= ratio.main_child_index < child_count:
        return False
    return ratio.value[1] != 0


def distribute(
    container_width: float,
    gap: float,
    child_count: int,
    constraint: ChildrenConstraints | None = None,
) -> list[str]:
    """Compute each child's width as a pixel string.

    Args:
        container_width: Container width in pixels.
        gap: Gap between adjacent children in pixels.
        child_count: Number of configured children.
        constraint: Distribution strategy (equals when omitted).

    Returns:
        One width per child (e.g. ``"186.67px"``); empty for no children.

    Example:
        >>> distribute(600, 20, 3)
        ['186.67px', '186.67px', '186.67px']
    """
    if child_count <= 0:
        return []

    constraint = constraint or ChildrenConstraints()
    remaining = content_space(container_width, gap, child_count)
    if remaining < 0:
        logger.debug(
            "Gaps exceed container width (%s px over %s children); widths go negative",
            remaining,
            child_count,
        )

    strategy = constraint.width_distribution_type

    if strategy == WidthDistribution.RATIO.value:
        if not ratio_is_valid(constraint, child_count):
            logger.debug(
                "Invalid ratio constraint for %s children, using equals", child_count
            )
            return _equals(remaining, child_count)
        ratio = constraint.ratio
        numerator, denominator = ratio.value
        main_width = remaining * numerator / denominator
        other_width = (remaining - main_width) / (child_count - 1)
        widths = [format_px(other_width)] * child_count
        widths[ratio.main_child_index] = format_px(main_width)
        return widths

    if strategy == WidthDistribution.MANUAL.value:
        widths = list(constraint.widths or ())
        if len(widths) == child_count:
            return widths
        logger.debug(
            "Manual widths (%s) do not match child count (%s), using equals",
            len(widths),
            child_count,
        )

    return _equals(remaining, child_count)


@dataclass(frozen=True)
class WidthPlan:
    """Resolved horizontal geometry for one container render."""

    container_width: float
    gap: float
    widths: tuple[str, ...]

    @property
    def gap_count(self) -> int:
        return max(len(self.widths) - 1, 0) if self.gap > 0 else 0


def plan_widths(
    config: ContainerConfig,
    child_count: int,
    canvas_width: int = DEFAULT_CANVAS_WIDTH,
) -> WidthPlan:
    """Resolve container width, gap and child widths in one step."""
    container_width = resolve_container_width(config, canvas_width)
    gap = resolve_gap(config.gap)
    widths = distribute(container_width, gap, child_count, config.children_constraints)
    return WidthPlan(container_width=container_width, gap=gap, widths=tuple(widths))


__all__ = [
    "DEFAULT_CANVAS_WIDTH",
    "resolve_container_width",
    "resolve_gap",
    "content_space",
    "distribute",
    "ratio_is_valid",
    "WidthPlan",
    "plan_widths",
]
