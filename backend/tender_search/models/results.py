"""Result envelopes returned by the Cloud Function wrapper."""
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, Field

from .search import Tender

T = TypeVar("T")


class ActionResult(BaseModel, Generic[T]):
    """Uniform outcome of a remote call: a status plus either data or an error."""
    status: int = Field(..., description="HTTP status code of the outcome")
    data: Optional[T] = Field(None, description="Payload on success")
    error: Optional[str] = Field(None, description="Error message on failure")

    def to_body(self) -> dict:
        """JSON body for HTTP responses, without unset fields."""
        return self.model_dump(mode="json", exclude_none=True)


class RemoteResponse(BaseModel):
    """Raw response from an authenticated Cloud Function call."""
    status: int
    text: str = ""


SearchResponse = ActionResult[list[Tender]]
