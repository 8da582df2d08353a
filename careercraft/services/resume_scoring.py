"""Local resume heuristics that run without the AI provider."""

from __future__ import annotations

import math
import re

from careercraft.schemas.resume import MatchResult, ResumeAnalysis, ResumeSections

ACTION_VERBS = (
    "led",
    "built",
    "created",
    "designed",
    "implemented",
    "optimized",
    "reduced",
    "increased",
    "launched",
    "delivered",
    "migrated",
    "scaled",
    "drove",
    "owned",
    "improved",
    "automated",
)

MUST_SECTIONS = ("summary", "experience", "education", "skills")

STOP_WORDS = frozenset(
    {
        "the", "and", "of", "to", "a", "in", "for", "with", "on", "at",
        "by", "an", "is", "are", "as", "or", "be", "you", "we", "our",
    }
)

SECTION_POINTS = 70
VERB_POINTS_MAX = 20
VERB_POINTS_EACH = 4
QUANTIFICATION_POINTS = 10
MAX_JD_KEYWORDS = 20

_NUMBER_RE = re.compile(r"\b\d+(\.\d+)?%?")
_NON_WORD_RE = re.compile(r"[^a-z0-9\s]")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def normalize_score(score: float | None) -> int:
    """Bring a 0-10 or 0-100 score onto the 0-100 scale."""
    if score is None:
        return 0
    if score > 10:
        return _round_half_up(score)
    return _round_half_up(score * 10)


def get_score_verdict(score: float) -> str:
    if score >= 70:
        return "Good match"
    if score >= 30:
        return "Partial match"
    return "Not recommended"


def analyze_resume(resume: ResumeSections) -> ResumeAnalysis:
    pros: list[str] = []
    cons: list[str] = []
    improvements: list[str] = []
    score = 0.0

    sections = resume.model_dump()
    for name in MUST_SECTIONS:
        if (sections.get(name) or "").strip():
            score += SECTION_POINTS / len(MUST_SECTIONS)
            pros.append(f"Has {name} section")
        else:
            cons.append(f"Missing {name} section")
            improvements.append(f"Add a clear {name} section with relevant details.")

    text = " ".join([resume.summary, resume.experience]).lower()
    verb_hits = [verb for verb in ACTION_VERBS if verb in text]
    score += min(len(verb_hits) * VERB_POINTS_EACH, VERB_POINTS_MAX)
    if len(verb_hits) >= 3:
        pros.append("Uses strong action verbs")
    else:
        improvements.append("Incorporate action verbs (e.g., led, built, optimized)")

    if _NUMBER_RE.search(resume.experience):
        score += QUANTIFICATION_POINTS
        pros.append("Includes quantifiable achievements")
    else:
        cons.append("Lacks quantifiable achievements")
        improvements.append("Add metrics (e.g., 'Increased X by 15%')")

    return ResumeAnalysis(
        score=min(100, _round_half_up(score)),
        pros=pros,
        cons=cons,
        improvements=improvements,
    )


def _normalize(text: str) -> str:
    return _NON_WORD_RE.sub(" ", text.lower())


def extract_keywords(tokens: list[str], limit: int = MAX_JD_KEYWORDS) -> list[str]:
    freq: dict[str, int] = {}
    for token in tokens:
        if token in STOP_WORDS or len(token) < 3:
            continue
        freq[token] = freq.get(token, 0) + 1
    ranked = sorted(freq, key=lambda token: freq[token], reverse=True)
    return ranked[:limit]


def calc_match_score(resume_text: str, jd_text: str) -> MatchResult:
    resume_tokens = set(_normalize(resume_text).split())
    keywords = extract_keywords(_normalize(jd_text).split())

    pros: list[str] = []
    missing: list[str] = []
    for keyword in keywords:
        if keyword in resume_tokens:
            pros.append(f"Contains keyword: {keyword}")
        else:
            missing.append(keyword)

    coverage = len(pros) / len(keywords) if keywords else 0.0
    len_factor = min(len(resume_text) / (len(jd_text) or 1), 1.2)
    score = min(100, _round_half_up(60 * coverage + 40 * min(len_factor, 1)))

    cons: list[str] = []
    if coverage < 0.6:
        cons.append("Low keyword coverage vs JD")
    if len_factor < 0.5:
        cons.append("Resume content seems brief vs JD")

    suggestions: list[str] = []
    if missing:
        suggestions.append("Add missing skills and keywords highlighted below.")
    if coverage < 0.6:
        suggestions.append("Tailor experience bullets to mirror JD phrasing.")
    if not _NUMBER_RE.search(resume_text):
        suggestions.append("Quantify achievements to strengthen impact.")

    return MatchResult(
        score=score,
        verdict=get_score_verdict(score),
        pros=pros,
        cons=cons,
        missing=missing,
        suggestions=suggestions,
    )
