# main.py
import logging
import os

from fastapi import FastAPI, Request

from cors import json_response
from errors import SkillAnalysisError
from routes.skill_routes import router as skill_router

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Skill Analysis API",
        description="Backend API that analyzes a profile with Gemini and stores the result in Supabase",
        version="1.0.0"
    )

    # CORS headers are attached per response by the cors module, including on errors
    app.include_router(skill_router)

    # ✅ Errors raised while resolving dependencies (e.g. settings) never reach the route's try
    @app.exception_handler(SkillAnalysisError)
    async def skill_analysis_error_handler(request: Request, exc: SkillAnalysisError):
        logger.error("❌ %s: %s", exc.error, exc.details)
        return json_response(exc.to_dict(), status_code=exc.status_code)

    @app.get("/")
    def root():
        return {"message": "Skill analysis backend running"}

    return app


app = create_app()
