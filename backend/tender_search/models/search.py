"""Search-related Pydantic models."""
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, RootModel, TypeAdapter


class Tender(BaseModel):
    """A tender record as returned by the search function."""
    id: str = Field(..., description="Tender identifier")
    title: str = Field(..., description="Tender title")
    description: str = Field(..., description="Tender description")


class SearchRequest(RootModel[dict[str, Any]]):
    """Search request forwarded to the search function.

    Wraps the request body as-is: a free-form ``query`` plus any other
    parameters. Callers build it with ``model_construct`` so nothing is
    validated or dropped on the way through.
    """

    @property
    def query(self) -> Any:
        return self.root.get("query")


class FileData(BaseModel):
    """Location of a tender attachment in Cloud Storage."""
    model_config = ConfigDict(populate_by_name=True)

    file_uri: str = Field(..., alias="fileUri", description="gs:// URI of the file")
    mime_type: str = Field(..., alias="mimeType", description="MIME type of the file")


class TenderFile(BaseModel):
    """Tender attachment reference."""
    model_config = ConfigDict(populate_by_name=True)

    file_data: FileData = Field(..., alias="fileData")


# Validates a whole response body; one bad record rejects the lot.
TenderList = TypeAdapter(list[Tender])
