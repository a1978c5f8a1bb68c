"""Cloud Function client dependency management."""
from typing import Annotated, Optional
from fastapi import Depends

from ..core.config import Settings
from ..core.gcp import CloudFunctionClient, IdTokenProvider, build_credentials_info


# Global client instance - initialized at startup
_client_instance: Optional[CloudFunctionClient] = None


def init_client(settings: Settings) -> CloudFunctionClient:
    """Initialize the global Cloud Function client."""
    global _client_instance
    if _client_instance is None:
        token_provider = IdTokenProvider(build_credentials_info(settings))
        _client_instance = CloudFunctionClient(token_provider, timeout=settings.request_timeout)
    return _client_instance


async def close_client() -> None:
    """Close and forget the global client."""
    global _client_instance
    if _client_instance is not None:
        await _client_instance.close()
        _client_instance = None


def get_client() -> CloudFunctionClient:
    """Get the client instance."""
    if _client_instance is None:
        raise RuntimeError("Cloud Function client not initialized")
    return _client_instance


CloudFunctionDep = Annotated[CloudFunctionClient, Depends(get_client)]
