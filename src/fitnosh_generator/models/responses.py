"""HTTP response schemas. Field names follow the JSON contract."""

from datetime import datetime

from pydantic import BaseModel


class GenerateImageResponse(BaseModel):
    message: str = "Image generated successfully"
    imagePath: str
    imageUrl: str
    imageDisplayUrl: str
    directLink: str
    timestamp: str
    uniqueId: str


class ImageEntry(BaseModel):
    filename: str
    url: str
    created: datetime
    size: int


class ImageListResponse(BaseModel):
    images: list[ImageEntry]
    total: int
