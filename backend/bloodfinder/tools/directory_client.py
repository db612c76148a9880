from __future__ import annotations

import random
from typing import Any, Dict, List

import httpx
from loguru import logger

from ..models.donor import Donor, blood_group_for


class FetchFailure(Exception):
    """Donor data could not be obtained from the user directory."""


def donor_from_user(user: Dict[str, Any], rng: random.Random, availability_probability: float = 0.7) -> Donor:
    user_id = user["id"]
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise FetchFailure(f"User id must be an integer, got {user_id!r}")
    return Donor(
        id=user_id,
        name=user["name"],
        city=user["address"]["city"],
        blood_group=blood_group_for(user_id),
        available=rng.random() < availability_probability,
        request_sent=False,
    )


async def fetch_directory_users(client: httpx.AsyncClient, url: str) -> List[Dict[str, Any]]:
    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        raise FetchFailure(f"Request to {url} failed: {exc}") from exc

    if not response.is_success:
        raise FetchFailure(f"Failed to fetch donors: HTTP {response.status_code}")

    try:
        users = response.json()
    except ValueError as exc:
        raise FetchFailure("Directory returned a malformed body") from exc
    if not isinstance(users, list):
        raise FetchFailure("Directory response is not a list of users")

    logger.debug("Fetched {} users from {}", len(users), url)
    return users


def donors_from_users(
    users: List[Dict[str, Any]], rng: random.Random, availability_probability: float = 0.7
) -> List[Donor]:
    try:
        return [donor_from_user(user, rng, availability_probability) for user in users]
    except (KeyError, TypeError, ValueError) as exc:
        raise FetchFailure(f"Unexpected user record shape: {exc}") from exc
