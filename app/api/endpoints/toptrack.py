import asyncio
import logging
from typing import Awaitable, TypeVar

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.core.config import get_settings
from app.core.errors import UpstreamError
from app.schemas.models import AggregateResponse
from app.services.aggregator import Aggregator

router = APIRouter()
logger = logging.getLogger(__name__)

T = TypeVar("T")

DISCONNECT_POLL_INTERVAL = 0.5


# Dependency Injection for Service
def get_aggregator() -> Aggregator:
    return Aggregator(get_settings())


async def run_until_disconnect(request: Request, work: Awaitable[T]) -> T:
    """
    Await `work`, cancelling it if the caller hangs up first.
    Raises asyncio.CancelledError in that case.
    """
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=DISCONNECT_POLL_INTERVAL)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.info("Client disconnected, cancelling upstream calls")
                task.cancel()
                return await task
    finally:
        if not task.done():
            task.cancel()


@router.get(
    "/toptrack",
    response_model=AggregateResponse,
    summary="Top track of a region with lyrics and artist picture",
    responses={500: {"description": "An upstream service failed", "content": {"text/plain": {}}}},
)
async def top_track(
    request: Request,
    region: str = "",
    service: Aggregator = Depends(get_aggregator),
):
    """
    Looks up the most played track for `region`, then its lyrics and an
    image of the artist. Any upstream failure returns 500 with the error
    message as plain text; partial results are never returned.
    """
    try:
        return await run_until_disconnect(request, service.aggregate(region))
    except UpstreamError as e:
        logger.warning(f"/toptrack?region={region} aborted: {e}")
        return PlainTextResponse(str(e), status_code=500)
