from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict


BloodGroup = Literal["A+", "A-", "B+", "B-", "O+", "O-", "AB+", "AB-"]
BloodGroupFilter = Literal["All", "A+", "A-", "B+", "B-", "O+", "O-", "AB+", "AB-"]

# Order matters: a donor's group is BLOOD_GROUPS[id % 8].
BLOOD_GROUPS: List[str] = ["A+", "A-", "B+", "B-", "O+", "O-", "AB+", "AB-"]
ALL_GROUPS = "All"


def blood_group_for(donor_id: int) -> str:
    return BLOOD_GROUPS[donor_id % len(BLOOD_GROUPS)]


class Donor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    city: str
    blood_group: BloodGroup
    available: bool
    request_sent: bool = False


class DonorFilter(BaseModel):
    blood_group: BloodGroupFilter = ALL_GROUPS
    city: str = ""


class DonorView(BaseModel):
    loading: bool
    donors: List[Donor]
    available_count: int

    @property
    def total(self) -> int:
        return len(self.donors)

    @property
    def is_empty(self) -> bool:
        return not self.loading and self.total == 0
