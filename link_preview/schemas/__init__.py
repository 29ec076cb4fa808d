from link_preview.schemas.preview import (
    Layout,
    MetadataEnvelope,
    PreviewRead,
    PreviewState,
)

__all__ = [
    "Layout",
    "MetadataEnvelope",
    "PreviewRead",
    "PreviewState",
]
