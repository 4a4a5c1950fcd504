from customizer.src.services.parameter_list import ParameterList, seed_parameters
from customizer.src.services.renderer import (
    render_document,
    parse_trigger_branches,
    format_default,
    escape_quotes,
)
from customizer.src.services.exporter import ClipboardExporter
from customizer.src.services.session import PipelineSession, get_session

__all__ = [
    "ParameterList",
    "seed_parameters",
    "render_document",
    "parse_trigger_branches",
    "format_default",
    "escape_quotes",
    "ClipboardExporter",
    "PipelineSession",
    "get_session",
]
