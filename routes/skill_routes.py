import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from analyzer import SkillAnalyzer
from config import Settings, get_settings
from cors import json_response, preflight_response
from errors import InternalError, SkillAnalysisError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions/v1", tags=["Skill Analysis"])


def get_analyzer(settings: Settings = Depends(get_settings)) -> SkillAnalyzer:
    return SkillAnalyzer(settings)


# ✅ Preflight is answered before the analyzer (and its settings) are resolved
@router.options("/analyze-skill")
async def analyze_skill_preflight() -> Response:
    logger.info("📥 Incoming preflight request")
    return preflight_response()


@router.api_route("/analyze-skill", methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"])
async def analyze_skill(request: Request, analyzer: SkillAnalyzer = Depends(get_analyzer)) -> Response:
    logger.info("📥 Incoming request")
    try:
        data = await request.json()
        result = await analyzer.analyze(data)
        return json_response(result)

    except SkillAnalysisError as e:
        logger.warning("⚠️ %s: %s", e.error, e.details)
        return json_response(e.to_dict(), status_code=e.status_code)

    except Exception as e:
        logger.exception("❌ Uncaught error")
        error = InternalError(str(e) or "Unknown error")
        return json_response(error.to_dict(), status_code=error.status_code)
