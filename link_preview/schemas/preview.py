from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Layout(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class PreviewState(BaseModel):
    """Renderable result of a metadata fetch, fallback values included."""

    source_url: str = Field(default="", alias="href")
    title: str = ""
    description: str = ""
    image: str = ""
    resolved_link: str = Field(default="", alias="link")
    theme_color: str = Field(default="", alias="themeColor")
    is_loading: bool = Field(default=False, alias="loadingState")

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)


class MetadataEnvelope(BaseModel):
    """Top level of the metadata service body; every key of ``data`` is optional."""

    data: dict[str, Any]


class PreviewRead(PreviewState):
    layout: Layout = Layout.VERTICAL

    model_config = ConfigDict(use_enum_values=True)
