from fastapi import APIRouter, Depends, File, HTTPException, Query, Request, UploadFile, status

from app.api.v1.uploads import parse_upload
from app.core.rate_limit import UPLOAD_RATE_LIMIT, rate_limit
from app.core.security import require_api_key
from app.features.keyword_relevance import KeywordRelevance, evaluate_keyword_relevance
from app.schemas.analyzer import (
    AnalyzeRequest,
    ExtractTextResponse,
    KeywordRelevanceRequest,
    UploadAnalysisResponse,
)
from app.scoring import AnalysisError, AnalysisResult
from app.services.analyzer_service import analyze_resume_text

router = APIRouter(dependencies=[Depends(require_api_key)])


def _raise_analysis_http_error(exc: AnalysisError) -> None:
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc


@router.post("/analyze", response_model=AnalysisResult)
@rate_limit()
async def analyze_text(request: Request, payload: AnalyzeRequest):
    _ = request
    try:
        return await analyze_resume_text(payload.text, seed=payload.seed)
    except AnalysisError as exc:
        _raise_analysis_http_error(exc)


@router.post("/analyze/upload", response_model=UploadAnalysisResponse)
@rate_limit(UPLOAD_RATE_LIMIT)
async def analyze_upload(
    request: Request,
    file: UploadFile = File(...),
    seed: int | None = Query(default=None),
):
    _ = request
    parsed = await parse_upload(file)
    try:
        analysis = await analyze_resume_text(parsed.text, seed=seed)
    except AnalysisError as exc:
        _raise_analysis_http_error(exc)
    return UploadAnalysisResponse(
        filename=parsed.filename,
        source_type=parsed.source_type,
        is_placeholder=parsed.is_placeholder,
        analysis=analysis,
    )


@router.post("/extract-text", response_model=ExtractTextResponse)
@rate_limit(UPLOAD_RATE_LIMIT)
async def extract_text(request: Request, file: UploadFile = File(...)):
    _ = request
    parsed = await parse_upload(file)
    return ExtractTextResponse(
        filename=parsed.filename,
        source_type=parsed.source_type,
        text=parsed.text,
        characters=len(parsed.text),
        is_placeholder=parsed.is_placeholder,
        warnings=parsed.parsing_warnings,
    )


@router.post("/keywords/relevance", response_model=KeywordRelevance)
@rate_limit()
async def keyword_relevance(request: Request, payload: KeywordRelevanceRequest):
    _ = request
    return evaluate_keyword_relevance(payload.resume_text, payload.job_description_text)
