"""Search routes."""
import json
import logging
from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from ...models import SearchRequest
from ...dependencies.cloud_function import CloudFunctionDep
from ...dependencies.config import SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/search",
    tags=["search"]
)


@router.api_route("", methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
async def search(request: Request, client: CloudFunctionDep, settings: SettingsDep):
    """Proxy a search request to the search Cloud Function. POST only."""
    if request.method != "POST":
        return JSONResponse(
            status_code=405,
            content={"status": 405, "error": "Method Not Allowed"},
            headers={"Allow": "POST"},
        )

    try:
        raw = await request.body()
        payload = json.loads(raw) if raw else {}
        if not isinstance(payload, dict):
            raise ValueError("Search request body must be a JSON object")
        search_data = SearchRequest.model_construct(payload)

        logger.info(f"Processing search query: {str(search_data.query or '')[:100]}")
        result = await client.call_remote_search(settings.cloud_function_url, search_data)
    except Exception as e:
        logger.error(f"Error handling search request: {e}")
        return JSONResponse(status_code=500, content={"status": 500, "error": "Internal Server Error"})

    # 204 responses cannot carry a body
    if result.status == 204:
        return Response(status_code=204)
    return JSONResponse(status_code=result.status, content=result.to_body())
