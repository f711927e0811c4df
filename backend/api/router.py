from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_dictionary
from config import settings
from models.requests import MatchRequest, ScanRequest, TextMatchRequest
from models.responses import HealthResponse, ScanResponse
from models.schemas.match_result import MatchResult
from services import scan_pipeline
from services.errors import MalformedSignalError
from services.match_scorer import calculate_match_score
from services.skill_dictionary import SkillDictionary

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health(dictionary: SkillDictionary = Depends(get_dictionary)):
    return HealthResponse(status="ok", skills_loaded=len(dictionary))


@router.post("/match", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
async def match(request: Request, body: MatchRequest):
    return calculate_match_score(body.resume_skills, body.job_skills)


@router.post("/match/text", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
async def match_text(
    request: Request,
    body: TextMatchRequest,
    dictionary: SkillDictionary = Depends(get_dictionary),
):
    return scan_pipeline.match_texts(body.resume_text, body.job_description, dictionary)


@router.post("/scan", response_model=ScanResponse)
@limiter.limit(settings.rate_limit)
async def scan(
    request: Request,
    body: ScanRequest,
    dictionary: SkillDictionary = Depends(get_dictionary),
):
    if not body.resume_text.strip():
        raise HTTPException(status_code=400, detail="Resume text is empty")

    try:
        return await scan_pipeline.run_scan(
            body.resume_text,
            body.job_description,
            dictionary,
            file_meta=body.file_meta,
            job_title=body.job_title,
            reference_year=body.reference_year,
            signals=body.signals,
        )
    except MalformedSignalError as e:
        raise HTTPException(
            status_code=422,
            detail={"group": e.group, "message": str(e)},
        )
