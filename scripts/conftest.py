from collections.abc import AsyncIterator

import httpx
import pytest

from app.core.config import ServiceConfig, Settings

LASTFM_HOST = "lastfm.test"
MUSIXMATCH_HOST = "musixmatch.test"
SERPAPI_HOST = "serpapi.test"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        lastfm=ServiceConfig("Last.fm", f"http://{LASTFM_HOST}/2.0/", "lastfm-key", timeout=2.0),
        musixmatch=ServiceConfig(
            "Musixmatch", f"http://{MUSIXMATCH_HOST}/ws/1.1/matcher.lyrics.get", "mxm-key", timeout=2.0
        ),
        serpapi=ServiceConfig("SerpApi", f"http://{SERPAPI_HOST}/search.json", "serp-key", timeout=2.0),
        request_timeout=5.0,
    )


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Plain client so respx can intercept upstream calls."""
    async with httpx.AsyncClient() as client:
        yield client


def lastfm_payload(*tracks: dict) -> dict:
    return {"tracks": {"track": list(tracks), "@attr": {"country": "US", "page": "1"}}}


def lastfm_track(name: str, artist: str, image: str = "http://img/cover.png") -> dict:
    return {
        "name": name,
        "artist": {"name": artist, "mbid": "", "url": "https://www.last.fm/music/x"},
        "image": [{"#text": image, "size": "small"}],
    }


def musixmatch_payload(body: str | None, status_code: int = 200) -> dict:
    if body is None:
        return {"message": {"header": {"status_code": status_code}, "body": []}}
    return {
        "message": {
            "header": {"status_code": status_code},
            "body": {"lyrics": {"lyrics_id": 1, "lyrics_body": body}},
        }
    }


def serpapi_payload(*urls: str) -> dict:
    return {
        "search_metadata": {"status": "Success"},
        "images_results": [{"position": i + 1, "original": url, "thumbnail": url} for i, url in enumerate(urls)],
    }
