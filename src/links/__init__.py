"""Link and icon URL resolution collaborators."""

from .lib import (
    DEFAULT_ICON_SIZE,
    DEFAULT_LINK_TARGET,
    IconRequest,
    IconResolver,
    TemplateIconResolver,
    icon_request_from_config,
    link_rel,
    link_target,
    resolve_link,
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
