import logging
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from app.core.config import ServiceConfig
from app.core.errors import (
    UpstreamDecodeError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamTransportError,
)
from app.core.http_client import HttpClientManager, timeout_for

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseProvider:
    """
    Common plumbing for upstream API clients.
    Each provider gets its own ServiceConfig (URL, key, timeout).
    """

    def __init__(self, config: ServiceConfig, http_client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return self.config.name

    @property
    def client(self) -> httpx.AsyncClient:
        """Injected client if any, otherwise the shared one."""
        if self._http_client is not None:
            return self._http_client
        return HttpClientManager.get_client()

    async def _get(self, params: dict, schema: Type[ResponseT]) -> ResponseT:
        """
        GET the configured endpoint and validate the JSON body against `schema`.
        Raises a subclass of UpstreamError on any failure.
        """
        name = self.provider_name
        logger.debug(f"{name} request: {self.config.base_url}")

        try:
            response = await self.client.get(
                self.config.base_url,
                params=params,
                timeout=timeout_for(self.config),
            )
        except httpx.TimeoutException as e:
            logger.warning(f"{name} timed out after {self.config.timeout}s")
            raise UpstreamTimeoutError(f"{name} request timed out after {self.config.timeout}s", name) from e
        except httpx.HTTPError as e:
            logger.warning(f"{name} transport error: {e}")
            raise UpstreamTransportError(f"{name} request failed: {e}", name) from e

        if response.is_error:
            # Last.fm (400) and SerpApi (401) put their error payload in 4xx bodies
            data = self._parse_error_payload(response, schema)
            if data is not None:
                logger.warning(f"{name} returned HTTP {response.status_code} with an error payload")
                return data
            logger.warning(f"{name} returned HTTP {response.status_code}")
            raise UpstreamStatusError(
                f"{name} returned HTTP {response.status_code}",
                name,
                status_code=response.status_code,
            )

        try:
            return schema.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"{name} returned an unexpected payload: {e.error_count()} validation errors")
            raise UpstreamDecodeError(f"{name} returned an invalid response", name) from e

    @staticmethod
    def _parse_error_payload(response: httpx.Response, schema: Type[ResponseT]) -> Optional[ResponseT]:
        """Parsed body of an error response if it carries an upstream `error` field, else None."""
        try:
            data = schema.model_validate_json(response.content)
        except ValidationError:
            return None
        if getattr(data, "error", None) is None:
            return None
        return data
