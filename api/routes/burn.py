"""
Burn-rate routes: default scenario, form layout, evaluated chart and Chart.js document.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter

from api.requests import CONFIG_FORM, SloConfigRequest
from api.responses import ChartResponse
from api.routes.exception import handle_exceptions
from engine.chartjs import to_chartjs
from engine.slo import budget_impact, build_chart

router = APIRouter(tags=["Burn Rate"])

log = logging.getLogger(__name__)


@router.get("/burn-rate/defaults", summary="Default what-if scenario")
@handle_exceptions
async def burn_rate_defaults() -> Dict[str, Any]:
    return SloConfigRequest().model_dump(by_alias=True)


@router.get("/burn-rate/form", summary="Configuration form layout and input hints")
@handle_exceptions
async def burn_rate_form() -> Dict[str, Any]:
    return {"fieldsets": CONFIG_FORM}


@router.post("/burn-rate/chart", summary="Burn-rate curves and alert zone", response_model=ChartResponse)
@handle_exceptions
async def burn_rate_chart(req: SloConfigRequest) -> ChartResponse:
    config = req.to_config()
    chart = build_chart(config)
    log.info(
        "evaluated slo_target=%s bad_event_rate=%s burn_rate=%.3f alert=%s",
        config.slo_target,
        config.bad_event_rate,
        chart.burn_rate,
        chart.alert_zone is not None,
    )
    return ChartResponse.build(config, chart, budget_impact(config))


@router.post("/burn-rate/chartjs", summary="Chart.js line chart document")
@handle_exceptions
async def burn_rate_chartjs(req: SloConfigRequest) -> Dict[str, Any]:
    config = req.to_config()
    return to_chartjs(build_chart(config), config)
