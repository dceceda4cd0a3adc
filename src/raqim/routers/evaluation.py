from fastapi import APIRouter, HTTPException

from raqim.schemas.evaluation import EvaluateTextRequest, QualityReport
from raqim.services.evaluator import detect_contradictions, evaluate_response

router = APIRouter(prefix="/api", tags=["evaluation"])


@router.post("/evaluate", response_model=QualityReport)
async def evaluate_text(body: EvaluateTextRequest) -> QualityReport:
    """Score arbitrary text with the rule-based quality evaluator."""
    if not body.text.strip():
        raise HTTPException(status_code=422, detail="Text must not be empty")
    return QualityReport(
        evaluation=evaluate_response(body.text),
        contradictions=detect_contradictions(body.text),
    )
