"""
Type definitions and Pydantic models for Paperboy.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PaperboyConfig(BaseModel):
    """Contents of the YAML configuration file."""
    template: str = Field(..., description="Path of the header/footer template")
    output: str = Field(..., description="Path of the Markdown file to write")
    feeds: List[str] = Field(default_factory=list, description="Feed URLs, in order")

    model_config = ConfigDict(extra="ignore")


class Article(BaseModel):
    """Represents a feed article."""
    published_at: datetime
    title: str = ""
    url: str
    url_domain: str = ""

    model_config = ConfigDict(frozen=True)


class Template(BaseModel):
    """Header and footer of the output document, already trimmed."""
    header: str
    footer: str

    model_config = ConfigDict(frozen=True)
