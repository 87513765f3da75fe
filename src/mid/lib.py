"""Metadata-Intermediate-Definition (MID) layer.

The MID layer is the **Source of Truth** for the layout tree handed to the
compiler by the editing environment. It defines the per-kind configuration
records and the recursive LayoutNode model.

Editor JSON arrives camelCase (``widthType``, ``childrenConstraints``), so
every configuration model accepts both camelCase aliases and snake_case
field names. All models are frozen: the compiler treats its input as
read-only.

Note: Node kinds and enumerations are delegated to the authoritative schema
module (src/schema).
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from src.schema import (
    Alignment,
    BackgroundRepeat,
    BackgroundSize,
    BorderStyle,
    CellAlign,
    HeadingLevel,
    LinkTarget,
    LinkType,
    NodeKind,
    RotateOrientation,
    SectionType,
    TextAlign,
    WidthDistribution,
    WidthType,
)

Length = str | int | float


class _ConfigModel(BaseModel):
    """Base for configuration records (camelCase aliases, immutable)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
        extra="ignore",
    )


# =============================================================================
# Shared records
# =============================================================================


class BorderSide(_ConfigModel):
    """A ``{width, style, color}`` border triple."""

    width: str | None = Field(None, description="Border width (e.g. '1px')")
    style: BorderStyle | None = Field(None, description="Border style")
    color: str | None = Field(None, description="Border colour")

    @property
    def is_complete(self) -> bool:
        """A side is drawn only when width, style and colour are all set."""
        return bool(self.width and self.style and self.color)

    def to_css(self) -> str:
        return f"{self.width} {self.style} {self.color}"


class BorderConfig(BorderSide):
    """Uniform border plus optional per-side overrides.

    A fully specified side takes precedence over the uniform triple.
    """

    top: BorderSide | None = Field(None, description="Top side override")
    right: BorderSide | None = Field(None, description="Right side override")
    bottom: BorderSide | None = Field(None, description="Bottom side override")
    left: BorderSide | None = Field(None, description="Left side override")

    def sides(self) -> dict[str, BorderSide | None]:
        return {
            "top": self.top,
            "right": self.right,
            "bottom": self.bottom,
            "left": self.left,
        }


class BackgroundImage(_ConfigModel):
    """CSS background image."""

    src: str | None = Field(None, description="Image URL")
    repeat: BackgroundRepeat | None = Field(None, description="background-repeat")
    size: BackgroundSize | None = Field(None, description="background-size")
    position: str | None = Field(None, description="background-position")


class RatioConstraint(_ConfigModel):
    """Main child takes ``value[0] / value[1]`` of the content space."""

    main_child_index: int = Field(..., description="Index of the main child")
    value: tuple[float, float] = Field(
        ..., description="Numerator and denominator of the main child's share"
    )


class ChildrenConstraints(_ConfigModel):
    """Width distribution strategy for a container's children."""

    width_distribution_type: WidthDistribution = Field(
        WidthDistribution.EQUALS, description="equals, ratio or manual"
    )
    ratio: RatioConstraint | None = Field(
        None, description="Ratio parameters (ratio strategy only)"
    )
    widths: tuple[str, ...] | None = Field(
        None, description="Literal child widths (manual strategy only)"
    )


class InnerLink(_ConfigModel):
    """Typed link descriptor."""

    type: LinkType = Field(LinkType.NONE, description="Link variant")
    url: str | None = None
    email: str | None = None
    phone: str | None = None
    anchor: str | None = None
    target: LinkTarget | None = Field(None, description="Link target")


class _Typography(_ConfigModel):
    color: str | None = None
    text_align: TextAlign | None = None
    font_size: str | None = None
    font_weight: str | None = None
    font_style: str | None = None
    line_height: str | None = None
    letter_spacing: str | None = None
    text_transform: str | None = None
    text_decoration: str | None = None
    direction: str | None = None
    vertical_align: str | None = None
    white_space: str | None = None


# =============================================================================
# Layout configs
# =============================================================================


class RowConfig(_ConfigModel):
    """Side-by-side children in an auto-width table."""

    gap: str | None = Field(None, description="Horizontal gap between children")
    justify_content: Alignment | None = Field(None, description="Table alignment")
    align_items: Alignment | None = Field(None, description="Cell vertical alignment")
    width: str | None = None
    height: str | None = None
    padding: str | None = None
    background_color: str | None = None
    background_image: BackgroundImage | None = None
    border_radius: str | None = None
    border: BorderConfig | None = None
    should_wrap: bool = Field(False, description="Stack children on narrow viewports")


class ColumnConfig(_ConfigModel):
    """Vertically stacked children inside one cell."""

    gap: str | None = Field(None, description="Vertical gap between children")
    align_items: Alignment | None = Field(
        None, description="Horizontal alignment of content"
    )
    justify_content: Alignment | None = Field(
        None, description="Vertical alignment of content"
    )
    width: str | None = None
    height: str | None = None
    padding: str | None = None
    background_color: str | None = None
    background_image: BackgroundImage | None = None
    border_radius: str | None = None
    border: BorderConfig | None = None


class ContainerConfig(_ConfigModel):
    """Pixel-width box that distributes its width among its children."""

    width_type: WidthType = Field(WidthType.FULL, description="full or fixed")
    children_constraints: ChildrenConstraints = Field(
        default_factory=ChildrenConstraints,
        description="Width distribution strategy",
    )
    should_wrap: bool = Field(False, description="Stack children on narrow viewports")
    width: str | None = Field(None, description="Fixed width (px)")
    height: str | None = None
    gap: str | None = Field(None, description="Horizontal gap between children")
    padding: str | None = None
    align_items: Alignment | None = Field(None, description="Cell vertical alignment")
    justify_content: Alignment | None = Field(None, description="Table alignment")
    background_color: str | None = None
    background_image: BackgroundImage | None = None
    border_radius: str | None = None
    border: BorderConfig | None = None


class SectionConfig(_ConfigModel):
    """Top-level header, content or footer band."""

    section_type: SectionType = Field(SectionType.CONTENT, description="Section role")
    gap: str | None = Field(None, description="Vertical gap between children")
    padding: str | None = None
    background_color: str | None = None
    background_image: BackgroundImage | None = None
    border: BorderConfig | None = None


# =============================================================================
# Content configs
# =============================================================================


class TextConfig(_Typography):
    """Rich text block. ``text`` is trusted editor HTML."""

    text: str | None = Field(None, description="Rich text content (HTML)")
    padding: str | None = None
    background_color: str | None = None
    opacity: str | float | None = None


class HeadingConfig(_Typography):
    """Heading block."""

    text: str | None = Field(None, description="Heading content (HTML)")
    level: HeadingLevel = Field(HeadingLevel.H1, description="h1 to h6")
    padding: str | None = None
    background_color: str | None = None


class ButtonConfig(_ConfigModel):
    """Call-to-action button."""

    href: str | None = Field(None, description="Destination URL")
    inner_link: InnerLink | None = Field(None, description="Typed link (beats href)")
    text: str | None = Field(None, description="Button label")
    background_color: str = "#007bff"
    color: str = "#ffffff"
    padding: str = "12px 24px"
    border_radius: str = "3px"
    width: str | None = Field(None, description="Button width (px or %)")
    justify_content: Alignment = Alignment.CENTER
    text_align: TextAlign = TextAlign.CENTER
    font_size: str = "16px"
    font_weight: str = "500"
    font_style: str | None = None
    line_height: str = "1.2"
    letter_spacing: str | None = None
    text_transform: str | None = None
    text_decoration: str = "none"
    font_family: str = "Arial, sans-serif"
    white_space: str = "normal"


class IconConfig(_ConfigModel):
    """Icon image, optionally on a rounded background."""

    icon_identifier: str | None = Field(None, description="Icon set identifier")
    width: Length | None = None
    height: Length | None = None
    rotate: float | None = Field(None, description="Rotation in degrees")
    rotate_orientation: RotateOrientation | None = None
    color: str | None = Field(None, description="Icon colour (hex)")
    inner_link: InnerLink | None = None
    background_color: str | None = None
    padding: str = "0"
    border_radius: str = "0"
    justify_content: Alignment = Alignment.CENTER


class ImageConfig(_ConfigModel):
    """Block image."""

    src: str | None = Field(None, description="Image URL")
    alt: str = ""
    width: str | None = None
    height: str | None = None
    background_color: str | None = None
    padding: str | None = None
    border_radius: str | None = None
    href: str | None = Field(None, description="Optional link URL")
    target: LinkTarget | None = None


class DividerConfig(_ConfigModel):
    """Horizontal rule."""

    height: str = "1px"
    color: str = "#cccccc"
    width: str = "100%"
    margin: str = "20px 0"
    align: CellAlign = CellAlign.CENTER


class SpacerConfig(_ConfigModel):
    """Fixed-height vertical space."""

    height: str = Field(..., description="Spacer height (e.g. '20px')")


NodeConfig = Union[
    RowConfig,
    ColumnConfig,
    ContainerConfig,
    SectionConfig,
    TextConfig,
    HeadingConfig,
    ButtonConfig,
    IconConfig,
    ImageConfig,
    DividerConfig,
    SpacerConfig,
]

CONFIG_MODELS: dict[NodeKind, type[_ConfigModel]] = {
    NodeKind.ROW: RowConfig,
    NodeKind.COLUMN: ColumnConfig,
    NodeKind.CONTAINER: ContainerConfig,
    NodeKind.SECTION: SectionConfig,
    NodeKind.TEXT: TextConfig,
    NodeKind.HEADING: HeadingConfig,
    NodeKind.BUTTON: ButtonConfig,
    NodeKind.ICON: IconConfig,
    NodeKind.IMAGE: ImageConfig,
    NodeKind.DIVIDER: DividerConfig,
    NodeKind.SPACER: SpacerConfig,
}


# =============================================================================
# Tree
# =============================================================================


class LayoutNode(BaseModel):
    """Recursive node definition for the layout tree.

    Attributes:
        id: Optional identifier, used for diagnostics and validation.
        kind: Node kind from the schema vocabulary.
        config: Kind-specific configuration record.
        children: Ordered child nodes (empty for leaf kinds).
    """

    id: str | None = Field(None, description="Optional node identifier")
    kind: NodeKind = Field(..., description="Node kind")
    config: NodeConfig = Field(..., description="Kind-specific configuration")
    children: list["LayoutNode"] = Field(
        default_factory=list,
        description="Ordered child nodes (left-to-right / top-to-bottom)",
    )

    model_config = ConfigDict(use_enum_values=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _coerce_config(cls, data: Any) -> Any:
        """Parse the raw config mapping with the model for the node's kind."""
        if not isinstance(data, dict):
            return data
        try:
            kind = NodeKind(data.get("kind"))
        except ValueError:
            return data
        model = CONFIG_MODELS[kind]
        config = data.get("config")
        if isinstance(config, model):
            return data
        try:
            parsed = model.model_validate(config if config is not None else {})
        except ValidationError as exc:
            raise ValueError(f"invalid {kind.value} config: {exc}") from exc
        return {**data, "config": parsed}

    def walk(self):
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    @property
    def label(self) -> str:
        return self.id or self.kind


class GlobalConfig(_ConfigModel):
    """Document-wide body styling."""

    color: str = "#000000"
    font_size: str = "16px"
    background_color: str = "#ffffff"
    line_height: str = "1.4"
    background_image: BackgroundImage | None = None


class EmailDocument(BaseModel):
    """A complete email: document settings plus the layout tree."""

    title: str | None = Field(None, description="Document <title>")
    config: GlobalConfig = Field(
        default_factory=GlobalConfig, description="Body-level styling"
    )
    root: LayoutNode = Field(..., description="Root of the layout tree")

    model_config = ConfigDict(frozen=True)


def parse_layout(data: Any) -> EmailDocument:
    """Parse editor JSON into an EmailDocument.

    Accepts either a full document (``{"title", "config", "root"}``) or a
    bare layout node.

    Raises:
        pydantic.ValidationError: If the input does not describe a layout,
            including input that is not a JSON object.
    """
    if isinstance(data, dict) and "root" in data:
        return EmailDocument.model_validate(data)
    return EmailDocument(root=LayoutNode.model_validate(data))


def export_json_schema() -> dict[str, Any]:
    """Export the JSON schema of the layout tree."""
    return LayoutNode.model_json_schema(by_alias=True)


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
    # Tree
    "LayoutNode",
    "GlobalConfig",
    "EmailDocument",
    "parse_layout",
    "export_json_schema",
]
