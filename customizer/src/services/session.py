"""
In-memory editing session: one pipeline config, one parameter list.
"""

import logging
from functools import lru_cache
from typing import Optional

from customizer.src.config import get_settings
from customizer.src.models.pipeline import PipelineConfig, VmImage
from customizer.src.services.exporter import ClipboardExporter
from customizer.src.services.parameter_list import ParameterList
from customizer.src.services.renderer import render_document

logger = logging.getLogger(__name__)

def default_config() -> PipelineConfig:
    settings = get_settings()
    return PipelineConfig(
        project_name=settings.default_project_name,
        trigger_branches=settings.default_trigger_branches,
        vm_image=VmImage(settings.default_vm_image),
    )

class PipelineSession:
    def __init__(self, exporter: Optional[ClipboardExporter] = None):
        self.config = default_config()
        self.parameters = ParameterList()
        self.exporter = exporter or ClipboardExporter()

    def update_config(self, **fields) -> PipelineConfig:
        """Replace the given config fields; None values are left alone."""
        changes = {k: v for k, v in fields.items() if v is not None}
        self.config = PipelineConfig(**{**self.config.model_dump(), **changes})
        return self.config

    def document(self) -> str:
        return render_document(self.config, self.parameters.snapshot())

    async def export(self) -> str:
        return await self.exporter.export(self.document())

    def reset(self):
        logger.info("Resetting pipeline session to defaults")
        self.config = default_config()
        self.parameters = ParameterList()

@lru_cache()
def get_session() -> PipelineSession:
    return PipelineSession()
