from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.config import settings


class EvidenceItem(BaseModel):
    text: str
    source: str


class ExplainReason(BaseModel):
    requirement: str
    evidence: list[EvidenceItem] = Field(default_factory=list)


class SkillBreakdown(BaseModel):
    matched: list[str] = Field(default_factory=list)
    gaps: list[str] = Field(default_factory=list)
    transferable: list[str] = Field(default_factory=list)


class InterviewQuestions(BaseModel):
    behavioral: list[str] = Field(default_factory=list)
    occupational: list[str] = Field(default_factory=list)


class ExplainResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(ge=0, le=100)
    summary: str
    reasons: list[ExplainReason] = Field(default_factory=list)
    skills: SkillBreakdown = Field(default_factory=SkillBreakdown)
    strengths: list[str] = Field(default_factory=list)
    gaps: list[str] = Field(default_factory=list)
    interview_questions: InterviewQuestions = Field(
        default_factory=InterviewQuestions,
        alias="interviewQuestions",
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ExplainRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: str = Field(alias="resumeText", max_length=settings.explain_max_input_chars)
    job_description_text: str = Field(
        alias="jobDescriptionText",
        max_length=settings.explain_max_input_chars,
    )
    job_id: str | None = Field(default=None, alias="jobId", max_length=200)
    candidate_id: str | None = Field(default=None, alias="candidateId", max_length=200)
    application_id: str | None = Field(default=None, alias="applicationId", max_length=200)

    @field_validator("resume_text", "job_description_text")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be blank")
        return value


class ExplainResponse(ExplainResult):
    run_id: str = Field(alias="runId")


class ExplainRunSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    run_id: str = Field(alias="runId")
    created_at: datetime = Field(alias="createdAt")
    score: int
    summary: str
    job_id: str | None = Field(default=None, alias="jobId")
    candidate_id: str | None = Field(default=None, alias="candidateId")
    application_id: str | None = Field(default=None, alias="applicationId")


class ExplainRunDetail(ExplainRunSummary):
    user_id: str | None = Field(default=None, alias="userId")
    stopwords_version: str = Field(alias="stopwordsVersion")
    result: ExplainResult
