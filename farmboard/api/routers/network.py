from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from farmboard.api.deps import get_network_status_use_case
from farmboard.api.schemas.network import NetworkStatusResponse
from farmboard.application.use_cases.get_network_status import GetNetworkStatusUseCase

router = APIRouter()


@router.get("/v1/network", response_model=NetworkStatusResponse)
async def get_network_status(
    use_case: GetNetworkStatusUseCase = Depends(get_network_status_use_case),
):
    status = await use_case.execute()
    if status is None:
        raise HTTPException(status_code=503, detail="Network status unavailable.")
    return NetworkStatusResponse(
        healthy=status.healthy,
        version=status.version,
        epoch=status.epoch,
        slot_height=status.slot_height,
    )
