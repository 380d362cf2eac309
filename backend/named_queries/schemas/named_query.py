"""
Named query request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from named_queries.models.named_query import (
    DefaultView,
    NamedQuery,
    PipelineStage,
    QueryMetadata,
)


class NamedQueryCreate(BaseModel):
    """Create named query request."""
    name: str = Field(..., min_length=1, description="Unique query name")
    description: Optional[str] = Field(None, description="Query description")
    tags: list[str] = Field(default_factory=list, description="Tags used for filtering")
    categories: list[str] = Field(default_factory=list, description="Categories used for filtering")
    pipeline: list[PipelineStage] = Field(..., description="Aggregation pipeline, stored verbatim")
    metadata: QueryMetadata = Field(default_factory=QueryMetadata, description="Display metadata")


class NamedQueryUpdate(BaseModel):
    """
    Update named query request.

    Only the top-level fields present in the body are replaced; nested
    structures such as ``metadata`` are replaced as a whole.
    """
    name: Optional[str] = Field(None, min_length=1, description="Unique query name")
    description: Optional[str] = Field(None, description="Query description")
    tags: Optional[list[str]] = Field(None, description="Tags used for filtering")
    categories: Optional[list[str]] = Field(None, description="Categories used for filtering")
    pipeline: Optional[list[PipelineStage]] = Field(None, description="Aggregation pipeline")
    metadata: Optional[QueryMetadata] = Field(None, description="Display metadata")

    @field_validator("name", "pipeline", "tags", "categories", "metadata")
    @classmethod
    def reject_explicit_null(cls, value):
        # Validators only run on provided values, so None here was sent explicitly.
        if value is None:
            raise ValueError("field cannot be null")
        return value

    def to_update_document(self) -> dict:
        """Return the provided fields as a MongoDB ``$set`` document.

        Unset optional values inside nested structures are left out; an
        explicit ``description: null`` is kept so it clears the stored one.
        """
        full = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return {field: full.get(field) for field in self.model_fields_set}


class NamedQueryResponse(NamedQuery):
    """Full named query response."""
    id: str = Field(..., alias="_id", description="Query ID")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")
    updated_at: datetime = Field(..., alias="updatedAt", description="Last update timestamp")


class SummaryVisualization(BaseModel):
    """Visualization fields included in list results."""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    default_view: Optional[DefaultView] = Field(None, alias="defaultView")


class SummaryMetadata(BaseModel):
    """Metadata fields included in list results."""
    visualization: Optional[SummaryVisualization] = None


class NamedQuerySummary(BaseModel):
    """Reduced named query representation used by the list endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Query ID")
    name: str = Field(..., description="Query name")
    description: Optional[str] = Field(None, description="Query description")
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    metadata: Optional[SummaryMetadata] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt", description="Creation timestamp")


class NamedQueryListResponse(BaseModel):
    """Named query list response."""
    data: list[NamedQuerySummary] = Field(..., description="Matching queries, newest first")
    count: int = Field(..., description="Number of matching queries")


class MessageResponse(BaseModel):
    """Plain message response, also used for error bodies."""
    message: str
