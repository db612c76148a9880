from __future__ import annotations

import pytest

from bloodfinder.models.donor import BLOOD_GROUPS, Donor, DonorFilter
from bloodfinder.utils.filters import build_view, count_available, filter_donors


def donor(donor_id: int, group: str, city: str, available: bool = True) -> Donor:
    return Donor(id=donor_id, name=f"donor-{donor_id}", city=city, blood_group=group, available=available)


DONORS = [
    donor(1, "O+", "Delhi"),
    donor(2, "A+", "Delhi", available=False),
    donor(3, "O+", "Mumbai"),
    donor(4, "B-", "New Delhi"),
    donor(5, "O+", "delhi cantt", available=False),
]


def test_blood_group_filter_is_exact():
    result = filter_donors(DONORS[:2], DonorFilter(blood_group="O+"))

    assert [d.id for d in result] == [1]


def test_city_search_is_case_insensitive_substring():
    result = filter_donors([donor(1, "A+", "Delhi"), donor(2, "A+", "Mumbai")], DonorFilter(city="del"))

    assert [d.id for d in result] == [1]
    assert [d.id for d in filter_donors(DONORS, DonorFilter(city="DELHI"))] == [1, 2, 4, 5]


def test_default_filter_keeps_everything_in_order():
    assert filter_donors(DONORS, DonorFilter()) == DONORS


@pytest.mark.parametrize("group", ["All"] + BLOOD_GROUPS)
@pytest.mark.parametrize("city", ["", "del", "MUM", "zzz"])
def test_filtered_view_is_ordered_subset(group, city):
    criteria = DonorFilter(blood_group=group, city=city)

    view = build_view(DONORS, criteria)

    positions = [DONORS.index(d) for d in view.donors]
    assert positions == sorted(positions)
    for d in view.donors:
        assert group == "All" or d.blood_group == group
        assert city.lower() in d.city.lower()
    assert view.available_count <= view.total


def test_available_count_within_filter():
    view = build_view(DONORS, DonorFilter(blood_group="O+", city="del"))

    assert [d.id for d in view.donors] == [1, 5]
    assert view.available_count == 1
    assert count_available(DONORS) == 3


def test_empty_flag_only_when_not_loading():
    assert build_view([], DonorFilter()).is_empty is True
    assert build_view([], DonorFilter(), loading=True).is_empty is False
    assert build_view(DONORS, DonorFilter(city="Pune")).is_empty is True
