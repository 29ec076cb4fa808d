class PreviewError(Exception):
    """Base class for failures while fetching preview metadata."""


class MetadataTransportError(PreviewError):
    """The request to the metadata service could not complete."""


class MetadataStatusError(PreviewError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


class MalformedMetadataError(PreviewError):
    """The response body is not JSON or lacks a ``data`` object."""
