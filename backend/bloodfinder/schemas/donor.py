from __future__ import annotations

from typing import Any, Dict

from ..models.donor import Donor, DonorView


def can_request(donor: Donor) -> bool:
    return donor.available and not donor.request_sent


def donor_document(donor: Donor) -> Dict[str, Any]:
    return {
        "id": donor.id,
        "name": donor.name,
        "city": donor.city,
        "blood_group": donor.blood_group,
        "available": donor.available,
        "request_sent": donor.request_sent,
        "availability_label": "Available" if donor.available else "Not Available",
        "action_label": "Request Sent" if donor.request_sent else "Request Help",
        "action_enabled": can_request(donor),
    }


def view_document(view: DonorView) -> Dict[str, Any]:
    return {
        "loading": view.loading,
        "total": view.total,
        "available_count": view.available_count,
        "donors": [donor_document(donor) for donor in view.donors],
    }
