from __future__ import annotations

import time

from fastapi import APIRouter, Depends, Request

from discount_desk.config_store import ConfigStore, get_config_store
from discount_desk.core.logging_config import logger
from discount_desk.engine.deal_engine import STATUS_NO_COMPLIANT_OPTIONS, calculate_deal
from discount_desk.explain.formatter import context_message, empty_message, format_row
from discount_desk.schemas.deal_v1 import DealCalculationV1, DealInputV1

router = APIRouter(prefix="/api/discounts", tags=["discounts"])


@router.post("/calculate", response_model=DealCalculationV1)
def calculate(
    payload: DealInputV1,
    request: Request,
    store: ConfigStore = Depends(get_config_store),
) -> DealCalculationV1:
    t0 = time.time()

    loaded = store.get_config()
    calc = calculate_deal(payload.to_domain(), loaded.config)

    request_id = getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID", "unknown")
    logger.bind(
        request_id=request_id,
        deal_type=calc.deal_type.value,
        status=calc.status,
        row_count=len(calc.rows),
        config_source=loaded.source,
        duration_ms=round((time.time() - t0) * 1000, 2),
    ).info("discount_calculate")

    return DealCalculationV1(
        status=calc.status,
        dealType=calc.deal_type.value,
        messages=list(calc.messages),
        rows=[format_row(r) for r in calc.rows],
        context=context_message(calc),
        emptyMessage=empty_message(calc.deal_type) if calc.status == STATUS_NO_COMPLIANT_OPTIONS else None,
        configSource=loaded.source,
    )
