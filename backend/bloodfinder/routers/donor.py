from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger

from ..memory.donor_state import DonorState, get_donor_state
from ..models.donor import ALL_GROUPS, BloodGroupFilter, DonorFilter
from ..schemas.donor import donor_document, view_document

router = APIRouter(prefix="/donors", tags=["donors"])


def get_donor_filter(
    blood_group: BloodGroupFilter = Query(default=ALL_GROUPS),
    city: str = Query(default=""),
) -> DonorFilter:
    return DonorFilter(blood_group=blood_group, city=city)


@router.get("")
async def list_donors(
    criteria: DonorFilter = Depends(get_donor_filter),
    state: DonorState = Depends(get_donor_state),
) -> Dict[str, Any]:
    return view_document(state.view(criteria))


@router.post("/{donor_id}/request")
async def request_donor(
    donor_id: int,
    state: DonorState = Depends(get_donor_state),
) -> Dict[str, Any]:
    """Mark a request as sent for one donor. Nothing is delivered to the donor."""
    donor = state.find(donor_id)
    if donor is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Donor not found")
    if donor.request_sent:
        return donor_document(donor)
    if not donor.available:
        logger.warning("Rejected request for unavailable donor {}", donor_id)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Donor is not available")

    updated = state.handle_request(donor_id)
    logger.info("Request sent to donor {} ({})", donor_id, updated.name)
    await router.manager.notify("request_sent", {"id": donor_id})
    return donor_document(updated)


def init_router(manager) -> None:
    router.manager = manager
