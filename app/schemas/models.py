from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TrackImage(BaseModel):
    url: str = Field("", alias="#text", description="Cover art URL")

    model_config = ConfigDict(populate_by_name=True)


class Track(BaseModel):
    name: str
    artist: str
    image: List[TrackImage] = []

    @field_validator("artist", mode="before")
    @classmethod
    def _artist_name(cls, value: Any) -> Any:
        # Last.fm geo charts nest the artist as {"name": ..., "mbid": ..., "url": ...}
        if isinstance(value, dict):
            name = value.get("name")
            if not name:
                raise ValueError("artist object has no name")
            return name
        return value


class LyricsResult(BaseModel):
    text: str


class ArtistInfo(BaseModel):
    name: str
    image_url: str
    similar_to: Optional[List[str]] = None  # Reserved, never populated


class AggregateResponse(BaseModel):
    top_track: Track
    lyrics: str
    artist_info: ArtistInfo

    model_config = ConfigDict(extra='forbid')
