from fastapi import APIRouter, Depends
from typing import List

from customizer.src.models.schemas import ParameterResponse, ParameterUpdate
from customizer.src.services.session import PipelineSession, get_session

router = APIRouter(prefix="/pipeline/parameters", tags=["parameters"])

def list_response(session: PipelineSession) -> List[ParameterResponse]:
    return [ParameterResponse.from_definition(p) for p in session.parameters]

@router.get("", response_model=List[ParameterResponse])
async def list_parameters(session: PipelineSession = Depends(get_session)):
    return list_response(session)

@router.post("", response_model=List[ParameterResponse])
async def add_parameter(session: PipelineSession = Depends(get_session)):
    session.parameters.add()
    return list_response(session)

@router.patch("/{param_id}", response_model=List[ParameterResponse])
async def update_parameter(
    param_id: int,
    update: ParameterUpdate,
    session: PipelineSession = Depends(get_session),
):
    """
    Update one field of a parameter.
    Unknown ids and locked name/type edits leave the list unchanged.
    """
    session.parameters.update(param_id, update.field, update.value)
    return list_response(session)

@router.delete("/{param_id}", response_model=List[ParameterResponse])
async def remove_parameter(param_id: int, session: PipelineSession = Depends(get_session)):
    session.parameters.remove(param_id)
    return list_response(session)
