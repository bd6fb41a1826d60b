from typing import Optional


class UpstreamError(Exception):
    """Base class for failures talking to a third-party API."""

    def __init__(self, message: str, service: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.service = service

    def __str__(self) -> str:
        return self.message


class UpstreamTransportError(UpstreamError):
    """Connection, DNS or protocol failure."""
    pass


class UpstreamTimeoutError(UpstreamTransportError):
    pass


class UpstreamStatusError(UpstreamError):
    """Non-2xx status or an error payload returned by the upstream."""

    def __init__(self, message: str, service: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, service)
        self.status_code = status_code


class UpstreamDecodeError(UpstreamError):
    """Response body is not JSON or does not match the expected schema."""
    pass


class NotFoundError(UpstreamError):
    """The upstream answered, but with nothing usable."""
    pass


class TopTrackNotFoundError(NotFoundError):
    def __init__(self, region: str, service: Optional[str] = None, detail: Optional[str] = None):
        message = f"no top tracks found for the region {region}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, service)
        self.region = region
        self.detail = detail


class LyricsNotFoundError(NotFoundError):
    def __init__(self, track: str, artist: str, service: Optional[str] = None):
        super().__init__(f"lyrics not found for the track {track} by {artist}", service)
        self.track = track
        self.artist = artist


class ArtistImageNotFoundError(NotFoundError):
    def __init__(self, artist: str, service: Optional[str] = None):
        super().__init__(f"no image found for the artist {artist}", service)
        self.artist = artist
