from pydantic import BaseModel, ConfigDict

REQUIRED_FIELDS = ("fullName", "email", "primarySkill", "experience")


class SubmissionRequest(BaseModel):
    # Numbers sent by loosely-typed clients are accepted as text
    model_config = ConfigDict(coerce_numbers_to_str=True)

    fullName: str
    email: str  # format is not validated
    primarySkill: str
    experience: str
