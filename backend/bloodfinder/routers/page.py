from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..memory.donor_state import DonorState, get_donor_state
from ..models.donor import BLOOD_GROUPS, DonorFilter
from ..routers.donor import get_donor_filter
from ..schemas.donor import donor_document

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["page"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def donor_page(
    request: Request,
    criteria: DonorFilter = Depends(get_donor_filter),
    state: DonorState = Depends(get_donor_state),
) -> HTMLResponse:
    view = state.view(criteria)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "blood_groups": BLOOD_GROUPS,
            "criteria": criteria,
            "view": view,
            "cards": [donor_document(donor) for donor in view.donors],
        },
    )
