from link_preview.component import LinkPreviewCard
from link_preview.registry import ElementRegistry
from link_preview.schemas import Layout, PreviewState
from link_preview.services import MetadataService, default_theme

__version__ = "0.1.0"


def register(registry: ElementRegistry) -> None:
    """Define the preview card on ``registry``; called once by the host."""
    registry.define(LinkPreviewCard.tag, LinkPreviewCard)


__all__ = [
    "ElementRegistry",
    "Layout",
    "LinkPreviewCard",
    "MetadataService",
    "PreviewState",
    "default_theme",
    "register",
]
