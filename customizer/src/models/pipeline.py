from pydantic import BaseModel
from enum import Enum

class VmImage(str, Enum):
    UBUNTU = "ubuntu-latest"
    WINDOWS = "windows-latest"
    MACOS = "macos-latest"

class PipelineConfig(BaseModel):
    project_name: str
    trigger_branches: str
    vm_image: VmImage
