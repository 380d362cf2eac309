"""
Named query model for the namedqueries collection.

Field names are snake_case in Python and camelCase in MongoDB and on the
wire; every camelCase name is declared as an alias.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Pipeline stages are stored verbatim and never interpreted.
PipelineStage = dict[str, Any]

# Filter default values carry no shape constraint.
FilterValue = Union[bool, int, float, str, list[Any], dict[str, Any], None]


class ColumnType(str, Enum):
    """Data type of a result column."""
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


class DefaultView(str, Enum):
    """Default presentation of query results."""
    TABLE = "table"
    MAP = "map"
    CHART = "chart"


class ChartType(str, Enum):
    """Chart sub-type for the chart view."""
    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    SCATTER = "scatter"


class FilterType(str, Enum):
    """Kind of user-facing filter control."""
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    RANGE = "range"
    SELECT = "select"


class ColumnDefinition(BaseModel):
    """How one result field is typed and displayed."""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    name: str = Field(..., description="Result field name")
    type: ColumnType = Field(..., description="Column data type")
    display_name: Optional[str] = Field(None, alias="displayName", description="Column header")
    sortable: bool = Field(default=True, description="Whether the column can be sorted")
    filterable: bool = Field(default=True, description="Whether the column can be filtered")
    formatter: Optional[str] = Field(None, description="Formatter identifier")


class ChartConfig(BaseModel):
    """Chart view parameters."""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    type: Optional[ChartType] = Field(None, description="Chart sub-type")
    x_axis: Optional[str] = Field(None, alias="xAxis", description="Field plotted on the x axis")
    y_axis: Optional[str] = Field(None, alias="yAxis", description="Field plotted on the y axis")


class CoordinateFields(BaseModel):
    """Latitude/longitude field names for the map view."""
    lat: Optional[str] = None
    lng: Optional[str] = None


class MapConfig(BaseModel):
    """Map view parameters."""
    model_config = ConfigDict(populate_by_name=True)

    geo_json_field: Optional[str] = Field(None, alias="geoJsonField", description="GeoJSON field name")
    coordinate_fields: Optional[CoordinateFields] = Field(None, alias="coordinateFields")


class VisualizationConfig(BaseModel):
    """Default presentation and related display parameters."""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    default_view: DefaultView = Field(
        default=DefaultView.TABLE, alias="defaultView", validate_default=True
    )
    chart: Optional[ChartConfig] = None
    map: Optional[MapConfig] = None


class FilterDefinition(BaseModel):
    """A filter control exposed for a query's results."""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    field: str = Field(..., description="Field the filter applies to")
    type: FilterType = Field(..., description="Filter control type")
    options: list[str] = Field(default_factory=list, description="Allowed values for select filters")
    default_value: FilterValue = Field(None, alias="defaultValue", description="Initial filter value")


class QueryMetadata(BaseModel):
    """Display metadata attached to a named query."""
    columns: list[ColumnDefinition] = Field(default_factory=list)
    visualization: VisualizationConfig = Field(default_factory=VisualizationConfig)
    filters: list[FilterDefinition] = Field(default_factory=list)


class NamedQuery(BaseModel):
    """
    Named query document model for MongoDB namedqueries collection.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., min_length=1, description="Unique query name")
    description: Optional[str] = Field(None, description="Optional description")
    tags: list[str] = Field(default_factory=list, description="Tags used for filtering")
    categories: list[str] = Field(default_factory=list, description="Categories used for filtering")
    pipeline: list[PipelineStage] = Field(..., description="Aggregation pipeline, stored verbatim")
    metadata: QueryMetadata = Field(default_factory=QueryMetadata)
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
