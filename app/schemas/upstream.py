"""
Typed views of the third-party JSON payloads.
Every nested field is optional so that a surprising shape surfaces as
"nothing found" rather than an exception deep inside extraction code.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, field_validator

from app.schemas.models import Track


# --- Last.fm geo.gettoptracks ---

class LastFmTrackList(BaseModel):
    track: List[Track] = []

    @field_validator("track", mode="before")
    @classmethod
    def _single_track(cls, value: Any) -> Any:
        # A one-element chart is sometimes returned as a bare object
        if isinstance(value, dict):
            return [value]
        return value


class LastFmTopTracksResponse(BaseModel):
    tracks: Optional[LastFmTrackList] = None
    error: Optional[int] = None
    message: Optional[str] = None


# --- Musixmatch matcher.lyrics.get ---

class MusixmatchLyrics(BaseModel):
    lyrics_body: Optional[str] = None


class MusixmatchBody(BaseModel):
    lyrics: Optional[MusixmatchLyrics] = None


class MusixmatchHeader(BaseModel):
    status_code: Optional[int] = None
    hint: Optional[str] = None


class MusixmatchMessage(BaseModel):
    header: Optional[MusixmatchHeader] = None
    body: Optional[MusixmatchBody] = None

    @field_validator("body", mode="before")
    @classmethod
    def _empty_body(cls, value: Any) -> Any:
        # Musixmatch sends "body": [] when nothing matched
        if isinstance(value, list):
            return None
        return value


class MusixmatchLyricsResponse(BaseModel):
    message: Optional[MusixmatchMessage] = None

    @property
    def status_code(self) -> Optional[int]:
        if self.message and self.message.header:
            return self.message.header.status_code
        return None

    @property
    def lyrics_body(self) -> str:
        if self.message and self.message.body and self.message.body.lyrics:
            return self.message.body.lyrics.lyrics_body or ""
        return ""


# --- SerpApi Google Images ---

class SerpApiImage(BaseModel):
    original: Optional[str] = None
    thumbnail: Optional[str] = None
    title: Optional[str] = None

    @property
    def url(self) -> Optional[str]:
        return self.original or self.thumbnail


class SerpApiImagesResponse(BaseModel):
    images_results: List[SerpApiImage] = []
    error: Optional[str] = None

    def first_image_url(self) -> Optional[str]:
        for image in self.images_results:
            if image.url:
                return image.url
        return None
