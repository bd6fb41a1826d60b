import asyncio
import logging
from typing import Optional

import httpx

from app.core.config import Settings
from app.core.errors import UpstreamError, UpstreamTimeoutError
from app.schemas.models import AggregateResponse
from app.services.providers.lastfm import LastFmProvider
from app.services.providers.musixmatch import MusixmatchProvider
from app.services.providers.serpapi import SerpApiImageProvider

logger = logging.getLogger(__name__)


class Aggregator:
    """
    Builds the /toptrack document: chart leader, its lyrics and an artist picture.

    The three lookups run one after another; each depends on the previous one
    succeeding. Any UpstreamError aborts the whole aggregation.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.request_timeout = settings.request_timeout
        self.charts = LastFmProvider(settings.lastfm, http_client)
        self.lyrics = MusixmatchProvider(settings.musixmatch, http_client)
        self.images = SerpApiImageProvider(settings.serpapi, http_client)

    async def aggregate(self, region: str) -> AggregateResponse:
        """Run all lookups under the overall request deadline."""
        logger.info(f"Aggregating top track for region {region!r}")
        try:
            result = await asyncio.wait_for(self._aggregate(region), timeout=self.request_timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"Aggregation for {region!r} exceeded {self.request_timeout}s")
            raise UpstreamTimeoutError(f"request timed out after {self.request_timeout}s") from e
        except UpstreamError as e:
            logger.warning(f"Aggregation for {region!r} failed at {e.service or 'upstream'}: {e}")
            raise

        logger.info(f"Region {region!r}: {result.top_track.name} - {result.top_track.artist}")
        return result

    async def _aggregate(self, region: str) -> AggregateResponse:
        track = await self.charts.get_top_track(region)
        lyrics = await self.lyrics.get_lyrics(track.name, track.artist)
        artist_info = await self.images.get_artist_info(track.artist)

        return AggregateResponse(
            top_track=track,
            lyrics=lyrics.text,
            artist_info=artist_info,
        )
