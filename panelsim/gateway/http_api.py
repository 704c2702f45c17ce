"""HTTP REST API adapter: stateless seed/toggle/run for editor front-ends.

The client sends the whole schematic and switch state with every request;
nothing is kept between calls, so independent schematics never interact.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from panelsim.gateway.auth import require_api_key
from panelsim.schematic.models import Component, Schematic, Wire
from panelsim.schematic.presets import PresetNotFound, get_preset, list_presets
from panelsim.simulation import SwitchState, run, seed, toggle
from panelsim.types import DisplayState

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["api"], dependencies=[Depends(require_api_key)])


class SeedRequest(BaseModel):
    components: list[Component] = Field(default_factory=list)


class ToggleRequest(BaseModel):
    switch_state: dict[str, bool] = Field(default_factory=dict)
    gate_id: str


class SwitchStateResponse(BaseModel):
    switch_state: dict[str, bool]


class RunRequest(BaseModel):
    components: list[Component] = Field(default_factory=list)
    wires: list[Wire] = Field(default_factory=list)
    switch_state: Optional[dict[str, bool]] = Field(
        default=None,
        description="Current gate positions; omitted means seed from the components",
    )


class RunResponse(BaseModel):
    component_states: dict[str, DisplayState]
    wire_energized: dict[str, bool]
    switch_state: dict[str, bool]


@router.post("/seed", response_model=SwitchStateResponse)
async def seed_switches(req: SeedRequest, request: Request):
    state = seed(req.components, request.app.state.roles)
    request.app.state.metrics.record_seed()
    return SwitchStateResponse(switch_state=state.as_dict())


@router.post("/toggle", response_model=SwitchStateResponse)
async def toggle_switch(req: ToggleRequest, request: Request):
    state = toggle(SwitchState.from_mapping(req.switch_state), req.gate_id)
    request.app.state.metrics.record_toggle()
    return SwitchStateResponse(switch_state=state.as_dict())


@router.post("/run", response_model=RunResponse)
async def run_simulation(req: RunRequest, request: Request):
    roles = request.app.state.roles
    config = request.app.state.config

    if req.switch_state is None:
        state = seed(req.components, roles)
    else:
        state = SwitchState.from_mapping(req.switch_state)

    started = time.perf_counter()
    result = run(req.components, req.wires, state, roles, config.proximity_threshold)
    latency_ms = (time.perf_counter() - started) * 1000

    energized = len(result.energized_components()) + len(result.energized_wires())
    request.app.state.metrics.record_run(len(req.components) + len(req.wires), energized, latency_ms)
    log.debug("Run: %d components, %d wires in %.2f ms", len(req.components), len(req.wires), latency_ms)

    return RunResponse(
        component_states=result.component_states,
        wire_energized=result.wire_energized,
        switch_state=state.as_dict(),
    )


@router.get("/presets")
async def get_presets():
    return list_presets()


@router.get("/presets/{preset_id}", response_model=Schematic)
async def get_preset_schematic(preset_id: str):
    try:
        return get_preset(preset_id)
    except PresetNotFound:
        raise HTTPException(404, f"Unknown preset: {preset_id}")
