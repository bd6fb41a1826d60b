import logging

from app.core.errors import ArtistImageNotFoundError, UpstreamStatusError
from app.schemas.models import ArtistInfo
from app.schemas.upstream import SerpApiImagesResponse
from app.services.providers.base import BaseProvider

logger = logging.getLogger(__name__)


class SerpApiImageProvider(BaseProvider):
    """Artist picture via SerpApi Google Images, first result only."""

    async def get_artist_info(self, artist: str) -> ArtistInfo:
        params = {
            "engine": "google",
            "q": artist,
            "tbm": "isch",
            "num": "1",
            "safe": "active",
            "api_key": self.config.api_key,
        }
        data = await self._get(params, SerpApiImagesResponse)

        # SerpApi reports "no results" through the same error field as bad keys
        if data.error and not data.images_results:
            if "hasn't returned any results" in data.error:
                raise ArtistImageNotFoundError(artist, self.provider_name)
            logger.warning(f"SerpApi error for {artist!r}: {data.error}")
            raise UpstreamStatusError(f"{self.provider_name} error: {data.error}", self.provider_name)

        image_url = data.first_image_url()
        if not image_url:
            raise ArtistImageNotFoundError(artist, self.provider_name)

        return ArtistInfo(name=artist, image_url=image_url)
