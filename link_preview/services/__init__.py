from link_preview.services.metadata import MetadataService, default_theme

__all__ = ["MetadataService", "default_theme"]
