from typing import Any, Dict, Optional


class SkillAnalysisError(Exception):
    """Base class for every failure that ends a request with a structured JSON body.

    ``error`` names the failure category, ``details`` carries the upstream
    diagnostic text verbatim when there is one.
    """

    status_code = 500
    error = "Internal server error"

    def __init__(self, details: Optional[str] = None, *, error: Optional[str] = None, message: Optional[str] = None):
        if error is not None:
            self.error = error
        self.details = details
        self.message = message
        super().__init__(details or self.error)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.message is not None:
            body["message"] = self.message
        if self.details is not None:
            body["details"] = self.details
        return body


class MissingFields(SkillAnalysisError):
    status_code = 400
    error = "Missing required fields"


class MissingCredential(SkillAnalysisError):
    error = "Configuration missing"


class ProviderError(SkillAnalysisError):
    error = "Gemini API error"


class NoContent(SkillAnalysisError):
    error = "No response from Gemini API"


class MalformedProviderOutput(SkillAnalysisError):
    error = "Invalid JSON from Gemini response"


class StorageError(SkillAnalysisError):
    error = "Failed to save analysis"


class InternalError(SkillAnalysisError):
    error = "Internal server error"
