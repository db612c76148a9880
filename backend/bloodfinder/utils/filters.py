from __future__ import annotations

from typing import Iterable, List

from ..models.donor import ALL_GROUPS, Donor, DonorFilter, DonorView


def matches_blood(donor: Donor, blood_group: str) -> bool:
    return blood_group == ALL_GROUPS or donor.blood_group == blood_group


def matches_city(donor: Donor, city: str) -> bool:
    return city.lower() in donor.city.lower()


def filter_donors(donors: Iterable[Donor], criteria: DonorFilter) -> List[Donor]:
    return [
        donor
        for donor in donors
        if matches_blood(donor, criteria.blood_group) and matches_city(donor, criteria.city)
    ]


def count_available(donors: Iterable[Donor]) -> int:
    return sum(1 for donor in donors if donor.available)


def build_view(donors: Iterable[Donor], criteria: DonorFilter, loading: bool = False) -> DonorView:
    """Derive what the page shows from the current collection and filter.

    Recomputed on every read; the result is never stored back on the state.
    """
    filtered = filter_donors(donors, criteria)
    return DonorView(loading=loading, donors=filtered, available_count=count_available(filtered))
