"""Content block AST and clipboard import data models"""

from enum import Enum
from typing import Annotated, Literal, NamedTuple, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter


class BlockType(str, Enum):
    """Markup keywords accepted after the ':::' block opener"""
    text = "text"
    tips = "tips"
    notes = "notes"
    timeline = "timeline"
    image = "image"
    gallery = "gallery"
    table = "table"


class TextBlock(BaseModel):
    type: Literal["text"] = "text"
    id: str
    content: str = ""
    heading: Optional[str] = None


class TipsBlock(BaseModel):
    type: Literal["tips"] = "tips"
    id: str
    title: Optional[str] = None
    tips: list[str] = []


class NotesBlock(BaseModel):
    type: Literal["notes"] = "notes"
    id: str
    title: Optional[str] = None
    notes: list[str] = []


class ItineraryStep(BaseModel):
    """One leg of a timeline; tips/notes stay None until a sub-section opens."""
    id: str
    title: str = ""
    details: list[str] = []
    tips: Optional[list[str]] = None
    notes: Optional[list[str]] = None


class TimelineBlock(BaseModel):
    type: Literal["timeline"] = "timeline"
    id: str
    title: Optional[str] = None
    steps: list[ItineraryStep] = []


class ImageBlock(BaseModel):
    type: Literal["image"] = "image"
    id: str
    url: str = ""
    caption: Optional[str] = None
    alt: Optional[str] = None


class GalleryImage(BaseModel):
    url: str = ""
    caption: Optional[str] = None
    alt: Optional[str] = None


class ImageGalleryBlock(BaseModel):
    type: Literal["imageGallery"] = "imageGallery"
    id: str
    title: Optional[str] = None
    images: list[GalleryImage] = []


class TableBlock(BaseModel):
    """Column counts are not enforced here; the validator reports mismatches."""
    type: Literal["table"] = "table"
    id: str
    title: Optional[str] = None
    caption: Optional[str] = None
    headers: list[str] = []
    rows: list[list[str]] = []


ContentBlock = Annotated[
    Union[TextBlock, TipsBlock, NotesBlock, TimelineBlock, ImageBlock, ImageGalleryBlock, TableBlock],
    Field(discriminator="type"),
]

DocumentAdapter = TypeAdapter(list[ContentBlock])


class RawBlock(NamedTuple):
    """One top-level ':::type [attrs] ... :::' span before type-specific parsing."""
    type: str
    attrs: str           # text inside [...] on the header line; '' when absent
    body: str
    line: int            # 1-based source line of the header


class ParsedTable(BaseModel):
    headers: list[str]
    rows: list[list[str]]


class ClipboardPayload(BaseModel):
    """The flavors a paste event can carry; either may be missing."""
    html: Optional[str] = None
    text: Optional[str] = None


class ImportResult(BaseModel):
    success: bool
    table: Optional[ParsedTable] = None
    text: Optional[str] = None       # rendered ':::table' block ready to splice
    detector: Optional[str] = None   # name of the detector that matched
    error: Optional[str] = None
