"""
Pydantic models for database documents and data structures.
"""
from named_queries.models.named_query import (
    NamedQuery,
    QueryMetadata,
    ColumnDefinition,
    ColumnType,
    VisualizationConfig,
    DefaultView,
    ChartConfig,
    ChartType,
    MapConfig,
    CoordinateFields,
    FilterDefinition,
    FilterType,
    FilterValue,
    PipelineStage,
)

__all__ = [
    "NamedQuery",
    "QueryMetadata",
    "ColumnDefinition",
    "ColumnType",
    "VisualizationConfig",
    "DefaultView",
    "ChartConfig",
    "ChartType",
    "MapConfig",
    "CoordinateFields",
    "FilterDefinition",
    "FilterType",
    "FilterValue",
    "PipelineStage",
]
