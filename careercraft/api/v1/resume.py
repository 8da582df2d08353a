from fastapi import APIRouter, Query

from careercraft.schemas.resume import MatchRequest, MatchResult, ResumeAnalysis, ResumeSections
from careercraft.services.resume_scoring import (
    analyze_resume,
    calc_match_score,
    get_score_verdict,
    normalize_score,
)

router = APIRouter()


@router.post("/resume/analyze", response_model=ResumeAnalysis)
def resume_analyze(payload: ResumeSections):
    return analyze_resume(payload)


@router.post("/jd/match", response_model=MatchResult)
def jd_match(payload: MatchRequest):
    return calc_match_score(payload.resume_text, payload.jd_text)


@router.get("/resume/verdict")
def resume_verdict(score: float | None = Query(default=None, ge=0)):
    normalized = normalize_score(score)
    return {"score": normalized, "verdict": get_score_verdict(normalized)}
