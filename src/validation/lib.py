"""Layout validation and static analysis.

This module provides advisory checks for LayoutNode trees, detecting
problems the compiler would otherwise paper over with silent fallbacks.
Rendering never depends on these checks.
"""

from collections.abc import Callable
from dataclasses import dataclass

from src.distribution import ratio_is_valid
from src.links import resolve_link
from src.mid import LayoutNode
from src.schema import NodeKind, WidthDistribution, is_layout_kind


@dataclass
class ValidationError:
    """Represents a validation error in a layout tree.

    Attributes:
        node_id: ID of the node with the error (its kind when it has no id).
        message: Human-readable error description.
        error_type: Category of the error.
    """

    node_id: str
    message: str
    error_type: str


def validate_layout(node: LayoutNode) -> list[ValidationError]:
    """Validate a LayoutNode tree.

    Performs the following checks:
        - Unique ID enforcement (no duplicate IDs)
        - Children attached to leaf kinds
        - Width distribution parameters that fall back to equals
        - Content nodes missing the content they need to render

    Args:
        node: The root LayoutNode to validate.

    Returns:
        list[ValidationError]: List of validation errors (empty if valid).

    Example:
        >>> errors = validate_layout(root_node)
        >>> if errors:
        ...     for e in errors:
        ...         print(f"{e.node_id}: {e.message}")
    """
    errors: list[ValidationError] = []

    id_counts: dict[str, int] = {}
    for current in node.walk():
        if current.id is not None:
            id_counts[current.id] = id_counts.get(current.id, 0) + 1

    for node_id, count in id_counts.items():
        if count > 1:
            errors.append(
                ValidationError(
                    node_id=node_id,
                    message=f"Duplicate ID '{node_id}' appears {count} times",
                    error_type="duplicate_id",
                )
            )

    for current in node.walk():
        errors.extend(_check_children(current))
        errors.extend(_check_distribution(current))
        errors.extend(_check_content(current))

    return errors


def is_valid(node: LayoutNode) -> bool:
    """Check if a layout tree is valid.

    Convenience function that returns True if no validation errors exist.
    """
    return not validate_layout(node)


def _check_children(node: LayoutNode) -> list[ValidationError]:
    if is_layout_kind(node.kind) or not node.children:
        return []
    return [
        ValidationError(
            node_id=node.label,
            message=(
                f"{node.kind} cannot have children "
                f"({len(node.children)} will be ignored)"
            ),
            error_type="constraint_violation",
        )
    ]


def _check_distribution(node: LayoutNode) -> list[ValidationError]:
    if node.kind != NodeKind.CONTAINER.value:
        return []
    constraint = node.config.children_constraints
    count = len(node.children)
    strategy = constraint.width_distribution_type

    if strategy == WidthDistribution.RATIO.value and not ratio_is_valid(
        constraint, count
    ):
        return [
            ValidationError(
                node_id=node.label,
                message=f"Ratio constraint is not applicable to {count} children",
                error_type="invalid_ratio",
            )
        ]

    if strategy == WidthDistribution.MANUAL.value:
        widths = constraint.widths or ()
        if len(widths) != count:
            return [
                ValidationError(
                    node_id=node.label,
                    message=f"{len(widths)} manual widths for {count} children",
                    error_type="manual_width_mismatch",
                )
            ]
    return []


def _button_has_content(node: LayoutNode) -> bool:
    config = node.config
    href = resolve_link(config.inner_link) or config.href
    return bool(href and config.text)


# Content checks: kind -> (predicate, message)
_CONTENT_CHECKS: dict[str, tuple[Callable[[LayoutNode], bool], str]] = {
    NodeKind.TEXT.value: (lambda n: bool(n.config.text), "text has no content"),
    NodeKind.HEADING.value: (lambda n: bool(n.config.text), "heading has no content"),
    NodeKind.BUTTON.value: (_button_has_content, "button needs a link and a label"),
    NodeKind.ICON.value: (
        lambda n: bool(n.config.icon_identifier),
        "icon has no identifier",
    ),
    NodeKind.IMAGE.value: (lambda n: bool(n.config.src), "image has no src"),
}


def _check_content(node: LayoutNode) -> list[ValidationError]:
    check = _CONTENT_CHECKS.get(node.kind)
    if check is None:
        return []
    predicate, message = check
    if predicate(node):
        return []
    return [
        ValidationError(
            node_id=node.label,
            message=f"{message}; it will render nothing",
            error_type="missing_content",
        )
    ]
