from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from customizer.src.models.schemas import (
    ConfigResponse,
    ConfigUpdate,
    DocumentResponse,
    ExportResponse,
)
from customizer.src.services.renderer import parse_trigger_branches
from customizer.src.services.session import PipelineSession, get_session

router = APIRouter(prefix="/pipeline", tags=["pipeline"])

def config_response(session: PipelineSession) -> ConfigResponse:
    config = session.config
    return ConfigResponse(
        project_name=config.project_name,
        trigger_branches=config.trigger_branches,
        vm_image=config.vm_image,
        branches=parse_trigger_branches(config.trigger_branches),
    )

@router.get("/config", response_model=ConfigResponse)
async def get_config(session: PipelineSession = Depends(get_session)):
    return config_response(session)

@router.put("/config", response_model=ConfigResponse)
async def update_config(
    update: ConfigUpdate,
    session: PipelineSession = Depends(get_session),
):
    """Change any of project name, trigger branches and agent image."""
    session.update_config(**update.model_dump(exclude_unset=True))
    return config_response(session)

@router.get("/document", response_model=DocumentResponse)
async def get_document(session: PipelineSession = Depends(get_session)):
    return DocumentResponse(document=session.document())

@router.get("/document/raw", response_class=PlainTextResponse)
async def get_raw_document(session: PipelineSession = Depends(get_session)):
    """Rendered azure-pipelines.yml, ready to save."""
    return PlainTextResponse(session.document(), media_type="text/yaml")

@router.post("/reset", response_model=DocumentResponse)
async def reset_pipeline(session: PipelineSession = Depends(get_session)):
    session.reset()
    return DocumentResponse(document=session.document())

@router.post("/export", response_model=ExportResponse)
async def export_document(session: PipelineSession = Depends(get_session)):
    """Copy the current document to the server's clipboard."""
    status = await session.export()
    return ExportResponse(status=status)

@router.get("/export/status", response_model=ExportResponse)
async def get_export_status(session: PipelineSession = Depends(get_session)):
    return ExportResponse(status=session.exporter.status)
