from __future__ import annotations

from typing import List

from ..models.donor import Donor, DonorFilter, DonorView
from ..utils.filters import build_view


def mark_request_sent(donors: List[Donor], donor_id: int) -> List[Donor]:
    """Return a new list with ``request_sent`` set on the donor matching ``donor_id``.

    Other donors are carried over as the same objects. An unknown id yields
    an unchanged copy.
    """
    return [
        donor.model_copy(update={"request_sent": True}) if donor.id == donor_id else donor
        for donor in donors
    ]


class DonorState:
    def __init__(self, loading: bool = True) -> None:
        self.donors: List[Donor] = []
        # The loader always runs at startup, so a fresh state starts out loading.
        self.loading: bool = loading

    def replace(self, donors: List[Donor]) -> None:
        self.donors = list(donors)

    def find(self, donor_id: int) -> Donor | None:
        for donor in self.donors:
            if donor.id == donor_id:
                return donor
        return None

    def handle_request(self, donor_id: int) -> Donor | None:
        self.donors = mark_request_sent(self.donors, donor_id)
        return self.find(donor_id)

    def view(self, criteria: DonorFilter) -> DonorView:
        return build_view(self.donors, criteria, loading=self.loading)


donor_state = DonorState()


async def get_donor_state() -> DonorState:
    return donor_state
