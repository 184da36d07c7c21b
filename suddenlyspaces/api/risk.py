"""Fictional tenant risk score. Random on every call; not a model."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from suddenlyspaces.schemas import RiskScoreRead
from suddenlyspaces.services import synthetic
from suddenlyspaces.services.synthetic import RiskScoreGenerator

router = APIRouter(prefix="/api/risk-score", tags=["risk-score"])


def get_risk_scores() -> RiskScoreGenerator:
    return synthetic.risk_scores


@router.get("", response_model=RiskScoreRead)
async def risk_score(
    tenant_id: str | None = Query(default=None, alias="tenantId"),
    risk_scores: RiskScoreGenerator = Depends(get_risk_scores),
):
    return RiskScoreRead(tenant_id=tenant_id or None, risk_score=risk_scores.score())
