from pydantic import BaseModel, Field


class ScoredAspect(BaseModel):
    score: int = Field(ge=0, le=100)
    feedback: str = ""


class EvaluationResult(BaseModel):
    length: ScoredAspect
    repetition: ScoredAspect
    structure: ScoredAspect
    overall_score: int = Field(ge=0, le=100)


class EvaluateTextRequest(BaseModel):
    text: str


class QualityReport(BaseModel):
    evaluation: EvaluationResult
    contradictions: list[str] = Field(default_factory=list)
