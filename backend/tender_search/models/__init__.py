"""Models package for the tender search gateway."""
from .search import (
    Tender,
    TenderList,
    SearchRequest,
    FileData,
    TenderFile,
)
from .results import ActionResult, RemoteResponse, SearchResponse

__all__ = [
    "Tender",
    "TenderList",
    "SearchRequest",
    "FileData",
    "TenderFile",
    "ActionResult",
    "RemoteResponse",
    "SearchResponse",
]
