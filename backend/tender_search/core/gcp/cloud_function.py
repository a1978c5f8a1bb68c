"""Authenticated calls to the search Cloud Function."""
import logging
from typing import Any, Literal, Optional, Union

import httpx
from pydantic import ValidationError

from ...models import ActionResult, RemoteResponse, SearchRequest, SearchResponse, TenderList
from .credentials import IdTokenProvider

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch data"
UNKNOWN_ERROR_MESSAGE = "Unknown error"

HttpMethod = Literal["GET", "POST"]


class CloudFunctionClient:
    """Calls Cloud Functions with an ID token scoped to the function URL."""

    def __init__(
        self,
        token_provider: IdTokenProvider,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token_provider = token_provider
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def call_remote_cloud_function(
        self,
        url: str,
        method: HttpMethod,
        data: Optional[Any] = None,
    ) -> Union[RemoteResponse, ActionResult]:
        """
        Send one authenticated request to ``url``.

        The URL doubles as the token audience. POST sends ``data`` as a JSON
        body, GET sends it as query parameters.

        Returns:
            The raw response, or a status-500 ``ActionResult`` if minting the
            token or sending the request raised.
        """
        if method not in ("GET", "POST"):
            raise ValueError(f"Unsupported method for Cloud Function call: {method}")

        try:
            token = await self.token_provider.fetch_id_token(url)
            headers = {"Authorization": f"Bearer {token}"}

            if method == "POST":
                response = await self._client.post(url, json=data, headers=headers)
            else:
                response = await self._client.get(url, params=data, headers=headers)

            return RemoteResponse(
                status=response.status_code,
                text=response.text,
            )
        except Exception as e:
            logger.error(f"Failed to fetch data. Error message: {e}")
            return ActionResult(status=500, error=FETCH_ERROR_MESSAGE)

    async def call_remote_search(self, url: str, data: SearchRequest) -> SearchResponse:
        """Run a search on the remote function and validate the tenders it returns."""
        response = await self.call_remote_cloud_function(url, "POST", data.model_dump())

        if isinstance(response, ActionResult):
            return SearchResponse(status=response.status, error=response.error)

        if response.status == 204:
            return SearchResponse(status=204, data=[])

        if response.status == 200:
            try:
                tenders = TenderList.validate_json(response.text)
            except ValidationError as e:
                message = e.errors()[0]["msg"]
                logger.warning(f"Search response failed validation: {message}")
                return SearchResponse(status=500, error=message)
            logger.info(f"Search returned {len(tenders)} tenders")
            return SearchResponse(status=200, data=tenders)

        logger.warning(f"Search function answered with status {response.status}")
        return SearchResponse(status=response.status, error=UNKNOWN_ERROR_MESSAGE)
