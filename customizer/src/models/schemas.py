from pydantic import BaseModel, Field
from typing import Optional, List, Literal

from customizer.src.models.parameter import ParameterDefinition, ParameterType
from customizer.src.models.pipeline import VmImage

class ConfigBase(BaseModel):
    project_name: str
    trigger_branches: str
    vm_image: VmImage

class ConfigResponse(ConfigBase):
    branches: List[str] = []

    class Config:
        from_attributes = True

class ConfigUpdate(BaseModel):
    project_name: Optional[str] = Field(None, min_length=1)
    trigger_branches: Optional[str] = None
    vm_image: Optional[VmImage] = None

class ParameterResponse(BaseModel):
    id: int
    name: str
    type: ParameterType
    default: str
    is_fixed_name: bool

    @classmethod
    def from_definition(cls, param: ParameterDefinition) -> "ParameterResponse":
        # Defaults go out in text form so NaN never reaches the JSON encoder
        return cls(
            id=param.id,
            name=param.name,
            type=param.type,
            default=param.default.as_text(),
            is_fixed_name=param.is_fixed_name,
        )

class ParameterUpdate(BaseModel):
    field: Literal["name", "type", "default"]
    value: str

class DocumentResponse(BaseModel):
    document: str

class ExportResponse(BaseModel):
    status: str
