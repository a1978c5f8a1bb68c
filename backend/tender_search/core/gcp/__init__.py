"""Google Cloud helpers: ID tokens and Cloud Function calls."""
from .credentials import IdTokenProvider, build_credentials_info
from .cloud_function import CloudFunctionClient, FETCH_ERROR_MESSAGE

__all__ = [
    "IdTokenProvider",
    "build_credentials_info",
    "CloudFunctionClient",
    "FETCH_ERROR_MESSAGE",
]
