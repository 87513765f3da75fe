"""MID layer - Metadata-Intermediate-Definition for email layouts.

This module provides the layout tree model (LayoutNode) and the per-kind
configuration records. Node kinds are delegated to the authoritative
schema module.

Example usage:
    >>> from src.mid import LayoutNode
    >>> node = LayoutNode.model_validate(
    ...     {"kind": "spacer", "config": {"height": "20px"}}
    ... )
    >>> node.config.height
    '20px'
"""

from .lib import (
    CONFIG_MODELS,
    BackgroundImage,
    BorderConfig,
    BorderSide,
    ButtonConfig,
    ChildrenConstraints,
    ColumnConfig,
    ContainerConfig,
    DividerConfig,
    EmailDocument,
    GlobalConfig,
    HeadingConfig,
    IconConfig,
    ImageConfig,
    InnerLink,
    LayoutNode,
    NodeConfig,
    RatioConstraint,
    RowConfig,
    SectionConfig,
    SpacerConfig,
    TextConfig,
    export_json_schema,
    parse_layout,
)

__all__ = [
    # Shared records
    "BorderSide",
    "BorderConfig",
    "BackgroundImage",
    "RatioConstraint",
    "ChildrenConstraints",
    "InnerLink",
    # Configs
    "RowConfig",
    "ColumnConfig",
    "ContainerConfig",
    "SectionConfig",
    "TextConfig",
    "HeadingConfig",
    "ButtonConfig",
    "IconConfig",
    "ImageConfig",
    "DividerConfig",
    "SpacerConfig",
    "NodeConfig",
    "CONFIG_MODELS",
    # Core model
    "LayoutNode",
    "GlobalConfig",
    "EmailDocument",
    "parse_layout",
    "export_json_schema",
]
