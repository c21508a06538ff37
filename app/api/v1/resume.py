from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from app.builder import ResumeData, resume_data_to_text
from app.core.rate_limit import rate_limit
from app.core.security import require_api_key
from app.parsing.structure import extract_resume_structure
from app.schemas.analyzer import (
    ResumeAnalysisResponse,
    ResumeTextResponse,
    StructureRequest,
    StructureResponse,
)
from app.scoring import AnalysisError
from app.services.analyzer_service import build_and_analyze

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post("/resume/render", response_model=ResumeTextResponse)
@rate_limit()
async def render_resume(request: Request, payload: ResumeData):
    _ = request
    return ResumeTextResponse(text=resume_data_to_text(payload))


@router.post("/resume/analyze", response_model=ResumeAnalysisResponse)
@rate_limit()
async def analyze_resume(
    request: Request,
    payload: ResumeData,
    seed: int | None = Query(default=None),
):
    _ = request
    try:
        text, analysis = await build_and_analyze(payload, seed=seed)
    except AnalysisError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return ResumeAnalysisResponse(text=text, analysis=analysis)


@router.post("/resume/structure", response_model=StructureResponse)
@rate_limit()
async def resume_structure(request: Request, payload: StructureRequest):
    _ = request
    return StructureResponse(sections=extract_resume_structure(payload.text))
