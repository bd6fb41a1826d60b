import logging

from app.core.errors import TopTrackNotFoundError, UpstreamStatusError
from app.schemas.models import Track
from app.schemas.upstream import LastFmTopTracksResponse
from app.services.providers.base import BaseProvider

logger = logging.getLogger(__name__)

LASTFM_INVALID_PARAMETERS = 6


class LastFmProvider(BaseProvider):
    """Top-track lookup via Last.fm geo.gettoptracks."""

    async def get_top_track(self, region: str) -> Track:
        # region goes to Last.fm as-is; it decides what a valid country is
        params = {
            "method": "geo.gettoptracks",
            "country": region,
            "api_key": self.config.api_key,
            "format": "json",
        }
        data = await self._get(params, LastFmTopTracksResponse)

        if data.error is not None:
            logger.warning(f"Last.fm error {data.error} for region {region!r}: {data.message}")
            if data.error == LASTFM_INVALID_PARAMETERS:
                # unknown or empty country
                raise TopTrackNotFoundError(region, self.provider_name, detail=data.message)
            raise UpstreamStatusError(
                f"{self.provider_name} error {data.error} for the region {region}: {data.message or 'unknown error'}",
                self.provider_name,
            )

        tracks = data.tracks.track if data.tracks else []
        if not tracks:
            raise TopTrackNotFoundError(region, self.provider_name)

        top = tracks[0]
        logger.debug(f"Top track for {region!r}: {top.name} - {top.artist}")
        return top
