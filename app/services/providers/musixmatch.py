import logging

from app.core.errors import LyricsNotFoundError, UpstreamStatusError
from app.schemas.models import LyricsResult
from app.schemas.upstream import MusixmatchLyricsResponse
from app.services.providers.base import BaseProvider

logger = logging.getLogger(__name__)


class MusixmatchProvider(BaseProvider):
    """
    Lyrics lookup via Musixmatch matcher.lyrics.get.

    Musixmatch answers HTTP 200 even on failure; the real status is in
    message.header.status_code (401 bad key, 404 no match, ...).
    """

    async def get_lyrics(self, track: str, artist: str) -> LyricsResult:
        # httpx percent-encodes query params, so "&" in a name stays inside its value
        params = {
            "format": "json",
            "apikey": self.config.api_key,
            "q_track": track,
            "q_artist": artist,
        }
        data = await self._get(params, MusixmatchLyricsResponse)

        status = data.status_code
        if status is not None and status not in (200, 404):
            logger.warning(f"Musixmatch status {status} for {track} - {artist}")
            raise UpstreamStatusError(
                f"{self.provider_name} returned status {status}",
                self.provider_name,
                status_code=status,
            )

        body = data.lyrics_body
        if not body:
            raise LyricsNotFoundError(track, artist, self.provider_name)

        return LyricsResult(text=body)
