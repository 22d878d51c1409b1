"""FastAPI router for payout calculation."""
import logging
from functools import lru_cache
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, ConfigDict, Field

from ..config.config_manager import get_config_manager, load_plan_config
from ..core import formatting, payout, simulate as sim
from ..export import excel_pack
from ..models.payout_schemas import PayoutBreakdown, PlanConfig, SalesInput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["payout"])


@lru_cache()
def get_plan_config() -> PlanConfig:
    """Default plan, loaded once from configuration."""
    return load_plan_config(get_config_manager())


class SummaryLine(BaseModel):
    label: str
    value: str


class ComputeRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "input": {
                    "arrSold": 93600,
                    "totalDeals": 22,
                    "bundleCount": 7,
                    "prepaidKicker": 100,
                    "clawbacks": 0,
                }
            }
        },
    )

    config: Optional[PlanConfig] = None
    sales: SalesInput = Field(..., alias="input")


class ComputeResponse(BaseModel):
    breakdown: PayoutBreakdown
    summary: List[SummaryLine]


class SimulationRequest(BaseModel):
    config: Optional[PlanConfig] = None
    performance: Dict[str, SalesInput] = Field(
        ..., examples=[{"alice": {"arrSold": 93600, "totalDeals": 22, "bundleCount": 7}}]
    )


class SimulationResponse(BaseModel):
    config: PlanConfig
    payouts: Dict[str, PayoutBreakdown]
    total_payout: float


class ExplainResponse(BaseModel):
    config: PlanConfig
    explanation: List[str]
    bundle_definition: str


@router.get("/plan/config", response_model=PlanConfig)
async def plan_config(plan: PlanConfig = Depends(get_plan_config)) -> PlanConfig:
    """Return the configured default plan."""
    return plan


@router.get("/plan/explain", response_model=ExplainResponse)
async def plan_explain(plan: PlanConfig = Depends(get_plan_config)) -> ExplainResponse:
    """Describe how payouts are calculated under the default plan."""
    return ExplainResponse(
        config=plan,
        explanation=formatting.explain(plan),
        bundle_definition=formatting.BUNDLE_DEFINITION,
    )


@router.post("/payout/compute", response_model=ComputeResponse)
async def compute_payout(
    payload: ComputeRequest, plan: PlanConfig = Depends(get_plan_config)
) -> ComputeResponse:
    """Compute one AE's payout breakdown."""
    breakdown = payout.compute(payload.config or plan, payload.sales)
    summary = [
        SummaryLine(label=label, value=value)
        for label, value in formatting.summary_lines(breakdown)
    ]
    return ComputeResponse(breakdown=breakdown, summary=summary)


@router.post("/payout/simulate", response_model=SimulationResponse)
async def simulate_payouts(
    payload: SimulationRequest, plan: PlanConfig = Depends(get_plan_config)
) -> SimulationResponse:
    """Compute payouts for a roster of AEs on one plan."""
    result = sim.run_simulation(payload.config or plan, payload.performance)
    return SimulationResponse(**result)


@router.post(
    "/export/excel",
    responses={
        200: {
            "content": {
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": {}
            },
            "description": "Binary Excel workbook",
        },
        400: {"description": "Empty roster"},
    },
)
def export_excel(
    payload: SimulationRequest, plan: PlanConfig = Depends(get_plan_config)
) -> Response:
    """Generate an Excel workbook of roster payouts."""
    result = sim.run_simulation(payload.config or plan, payload.performance)
    try:
        content = excel_pack.generate_workbook(result)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    logger.info("Exported payouts for %d reps", len(payload.performance))
    return Response(
        content,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": 'attachment; filename="payouts.xlsx"'},
    )
