import logging
from typing import Any, Dict, List, Optional, Protocol

from config import Settings
from db import SupabaseClient
from errors import MissingCredential, MissingFields
from gemini import GeminiClient
from models.analysis_model import AnalysisResponse
from models.submission_model import REQUIRED_FIELDS, SubmissionRequest
from utils import build_prompt, parse_analysis, to_storage_record

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


class RecordStore(Protocol):
    async def insert(self, record: Dict[str, Any]) -> List[Dict[str, Any]]: ...


def _is_text(value: Any) -> bool:
    # Numbers are accepted and coerced to text; booleans, lists and objects are not
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def validate_submission(data: Any) -> SubmissionRequest:
    # Anything other than a JSON object has none of the required fields
    if not isinstance(data, dict):
        raise MissingFields()
    if not all(data.get(field) and _is_text(data[field]) for field in REQUIRED_FIELDS):
        raise MissingFields()
    return SubmissionRequest(**{field: data[field] for field in REQUIRED_FIELDS})


def first_row_id(rows: List[Any]) -> Optional[Any]:
    if rows and isinstance(rows[0], dict):
        return rows[0].get("id")
    return None


class SkillAnalyzer:
    """Runs one submission through Gemini and stores the result in Supabase.

    ``generator`` and ``store`` can be injected; otherwise they are built from
    the settings once the matching credentials have been checked.
    """

    def __init__(
        self,
        settings: Settings,
        generator: Optional[TextGenerator] = None,
        store: Optional[RecordStore] = None,
    ):
        self.settings = settings
        self.generator = generator
        self.store = store

    def _generator(self) -> TextGenerator:
        if not self.settings.gemini_api_key:
            logger.error("❌ GEMINI_API_KEY missing")
            raise MissingCredential(
                error="Gemini API key not configured",
                message="Add GEMINI_API_KEY in the project environment variables.",
            )
        if self.generator is None:
            self.generator = GeminiClient(
                self.settings.gemini_api_key,
                model=self.settings.gemini_model,
                timeout=self.settings.http_timeout,
            )
        return self.generator

    def _store(self) -> RecordStore:
        if not self.settings.supabase_url or not self.settings.supabase_service_role_key:
            logger.error("❌ SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY missing")
            raise MissingCredential(error="Supabase configuration missing")
        if self.store is None:
            self.store = SupabaseClient(
                self.settings.supabase_url,
                self.settings.supabase_service_role_key,
                table=self.settings.supabase_table,
                timeout=self.settings.http_timeout,
            )
        return self.store

    async def analyze(self, data: Any) -> Dict[str, Any]:
        submission = validate_submission(data)
        generator = self._generator()

        prompt = build_prompt(submission)
        logger.info("📝 Prompt built for %s", submission.fullName)

        text = await generator.generate(prompt)
        analysis = parse_analysis(text, strict=self.settings.strict_analysis)

        store = self._store()
        rows = await store.insert(to_storage_record(submission, analysis))
        record_id = first_row_id(rows)
        logger.info("✅ Analysis saved with id %s", record_id)

        return AnalysisResponse(
            id=record_id,
            profileSummary=analysis.profileSummary,
            suggestedSkills=analysis.suggestedSkills,
            confidence=analysis.confidence,
        ).model_dump()
