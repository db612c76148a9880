from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bloodfinder.memory.donor_state import DonorState, get_donor_state
from bloodfinder.models.donor import Donor, blood_group_for
from bloodfinder.routers import donor, page


class RecordingHub:
    def __init__(self) -> None:
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    async def notify(self, event: str, payload: Dict[str, Any]) -> None:
        self.events.append((event, payload))


def make_donor(donor_id: int, name: str, city: str, available: bool = True, **extra: Any) -> Donor:
    fields = {"blood_group": blood_group_for(donor_id), **extra}
    return Donor(id=donor_id, name=name, city=city, available=available, **fields)


@pytest.fixture
def state() -> DonorState:
    return DonorState(loading=False)


@pytest.fixture
def hub() -> RecordingHub:
    return RecordingHub()


@pytest.fixture
def client(state: DonorState, hub: RecordingHub):
    app = FastAPI()
    donor.init_router(hub)
    app.include_router(page.router)
    app.include_router(donor.router)
    app.dependency_overrides[get_donor_state] = lambda: state
    with TestClient(app) as test_client:
        yield test_client
