from customizer.src.models.parameter import (
    ParameterType,
    StringValue,
    BoolValue,
    NumberValue,
    ParameterValue,
    ParameterDefinition,
    coerce_value,
)
from customizer.src.models.pipeline import VmImage, PipelineConfig
from customizer.src.models.schemas import (
    ConfigResponse,
    ConfigUpdate,
    ParameterResponse,
    ParameterUpdate,
    DocumentResponse,
    ExportResponse,
)

__all__ = [
    "ParameterType",
    "StringValue",
    "BoolValue",
    "NumberValue",
    "ParameterValue",
    "ParameterDefinition",
    "coerce_value",
    "VmImage",
    "PipelineConfig",
    "ConfigResponse",
    "ConfigUpdate",
    "ParameterResponse",
    "ParameterUpdate",
    "DocumentResponse",
    "ExportResponse",
]
