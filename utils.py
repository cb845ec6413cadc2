import json
import re
from typing import Any, Dict

from pydantic import ValidationError

from errors import MalformedProviderOutput
from models.analysis_model import AnalysisResult, StoredAnalysisRecord, StrictAnalysisResult
from models.submission_model import SubmissionRequest

_OPENING_FENCE = re.compile(r"^```(?:json)?\s*")
_CLOSING_FENCE = re.compile(r"\s*```$")


# ✅ Prompt sent to Gemini; the email is collected but never shared with the model
def build_prompt(submission: SubmissionRequest) -> str:
    return f"""Analyze this professional profile and respond with JSON only:

Name: {submission.fullName}
Skill: {submission.primarySkill}
Experience: {submission.experience}

Return exactly this JSON structure:
{{
  "profileSummary": "2-sentence professional summary highlighting strengths",
  "suggestedSkills": ["Skill1", "Skill2"],
  "confidence": 85
}}"""


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence (``` or ```json) wrapped around model output."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _OPENING_FENCE.sub("", cleaned, count=1)
        cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are accepted by json.loads but are not JSON
    raise ValueError(f"Unexpected token {name}")


def parse_analysis(text: str, strict: bool = False) -> AnalysisResult:
    """Parse Gemini output into an AnalysisResult.

    Values are not type checked unless ``strict`` is set, in which case the
    three fields must be a string, a list of strings and a number in 0-100.
    The parsed values themselves are always forwarded unchanged, so anything
    that could not be written back out as JSON (e.g. ``1e999``) is rejected here.
    """
    try:
        parsed = json.loads(strip_code_fences(text), parse_constant=_reject_constant)
        json.dumps(parsed, allow_nan=False)
    except ValueError as e:
        raise MalformedProviderOutput(str(e))

    if not isinstance(parsed, dict):
        raise MalformedProviderOutput("Expected a JSON object")

    if strict:
        try:
            StrictAnalysisResult.model_validate(parsed)
        except ValidationError as e:
            raise MalformedProviderOutput(str(e))

    return AnalysisResult(
        profileSummary=parsed.get("profileSummary"),
        suggestedSkills=parsed.get("suggestedSkills"),
        confidence=parsed.get("confidence"),
    )


def to_storage_record(submission: SubmissionRequest, analysis: AnalysisResult) -> Dict[str, Any]:
    record = StoredAnalysisRecord(
        user_name=submission.fullName,
        user_email=submission.email,
        primary_skill=submission.primarySkill,
        experience_description=submission.experience,
        ai_profile_summary=analysis.profileSummary,
        ai_suggested_skills=analysis.suggestedSkills,
        ai_confidence=analysis.confidence,
    )
    return record.model_dump()
