"""Link and icon resolution.

Links: a typed InnerLink descriptor becomes a protocol-appropriate href
(``mailto:``, ``tel:``, ``#anchor``) or None.

Icons: the compiler never fetches assets. It hands an IconRequest to an
IconResolver collaborator and embeds whatever URL comes back. The default
resolver fills in a URL template.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from src.config import get_icon_url_template
from src.mid import IconConfig, InnerLink
from src.schema import LinkTarget, LinkType, RotateOrientation
from src.units import format_number, leading_number

DEFAULT_ICON_SIZE = 24
DEFAULT_LINK_TARGET = LinkTarget.SELF.value


# =============================================================================
# Links
# =============================================================================


def resolve_link(link: InnerLink | None) -> str | None:
    """Resolve a typed link to an href.

    Returns None for "none", unknown types and variants missing their value.

    Example:
        >>> resolve_link(InnerLink(type="email", email="hi@example.com"))
        'mailto:hi@example.com'
    """
    if link is None:
        return None
    match link.type:
        case LinkType.URL.value:
            return link.url or None
        case LinkType.EMAIL.value:
            return f"mailto:{link.email}" if link.email else None
        case LinkType.PHONE.value:
            return f"tel:{link.phone}" if link.phone else None
        case LinkType.ANCHOR.value:
            return f"#{link.anchor}" if link.anchor else None
        case LinkType.PAGE_TOP.value:
            return "#top"
        case LinkType.PAGE_BOTTOM.value:
            return "#bottom"
        case _:
            return None


def link_target(link: InnerLink | None, default: str = DEFAULT_LINK_TARGET) -> str:
    """Target attribute for a typed link."""
    if link is None or link.target is None:
        return default
    return link.target


def link_rel(target: str | None) -> str | None:
    """``rel`` attribute required for links opening a new window."""
    return "noopener noreferrer" if target == LinkTarget.BLANK.value else None


# =============================================================================
# Icons
# =============================================================================


@dataclass(frozen=True)
class IconRequest:
    """Parameters passed to an icon resolver."""

    identifier: str
    size: float = DEFAULT_ICON_SIZE
    color: str = "#000000"
    rotation: float = 0
    rotation_direction: str = RotateOrientation.CW.value


class IconResolver(ABC):
    """Turns an IconRequest into a fully-qualified image URL."""

    @abstractmethod
    def resolve(self, request: IconRequest) -> str:
        """Return the image URL for the request."""


@dataclass(frozen=True)
class TemplateIconResolver(IconResolver):
    """Icon resolver that fills a URL template.

    Placeholders: ``{{height}}`` (size times ``scale``, for high-density
    screens), ``{{color}}`` (without ``#``), ``{{rotate}}``,
    ``{{rotate-orientation}}`` and ``{{icon-full-name}}``.
    """

    template: str = field(default_factory=get_icon_url_template)
    scale: float = 2

    def resolve(self, request: IconRequest) -> str:
        replacements = {
            "{{height}}": format_number(request.size * self.scale),
            "{{color}}": request.color.replace("#", ""),
            "{{rotate}}": format_number(request.rotation),
            "{{rotate-orientation}}": request.rotation_direction,
            "{{icon-full-name}}": request.identifier,
        }
        url = self.template
        for placeholder, value in replacements.items():
            url = url.replace(placeholder, value)
        return url


def icon_request_from_config(config: IconConfig) -> IconRequest | None:
    """Build an IconRequest; None when the icon has no identifier."""
    if not config.icon_identifier:
        return None
    return IconRequest(
        identifier=config.icon_identifier,
        size=leading_number(config.height, DEFAULT_ICON_SIZE),
        color=config.color or "#000000",
        rotation=config.rotate or 0,
        rotation_direction=config.rotate_orientation or RotateOrientation.CW.value,
    )


__all__ = [
    "DEFAULT_ICON_SIZE",
    "DEFAULT_LINK_TARGET",
    "resolve_link",
    "link_target",
    "link_rel",
    "IconRequest",
    "IconResolver",
    "TemplateIconResolver",
    "icon_request_from_config",
]
