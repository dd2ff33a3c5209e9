"""Text format model: selects the filtering rules applied to rich-text values."""

from typing import Optional

from sqlmodel import Field, SQLModel


class FilterFormat(SQLModel, table=True):
    __tablename__ = "filter_format"

    format: str = Field(primary_key=True)  # machine name, e.g. "basic_html"
    name: str
    weight: int = Field(default=0)
    status: bool = Field(default=True)
    description: Optional[str] = None


# Installed when missing; plain_text is also the fallback format
DEFAULT_FILTER_FORMATS = [
    {"format": "basic_html", "name": "Basic HTML", "weight": 0},
    {"format": "plain_text", "name": "Plain text", "weight": 10},
]
