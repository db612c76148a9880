from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx
from loguru import logger

from ..config import Settings, make_rng
from ..memory.donor_state import DonorState
from ..tools.directory_client import FetchFailure, donors_from_users, fetch_directory_users
from ..utils.logging import log_fetch_error


@dataclass
class LoaderEvent:
    type: str
    payload: Dict[str, Any]


EventSink = Callable[[LoaderEvent], Awaitable[None]]


class DonorLoader:
    """Fetches the user directory once and publishes it as the donor collection."""

    def __init__(
        self,
        settings: Settings,
        event_sink: Optional[EventSink] = None,
        rng: Optional[random.Random] = None,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self.settings = settings
        self.event_sink = event_sink
        self.rng = rng if rng is not None else make_rng(settings.random_seed)
        self.client_factory = client_factory or self._default_client

    def _default_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.settings.directory_timeout_s)

    async def _emit(self, event_type: str, payload: Dict[str, Any]) -> None:
        if self.event_sink is not None:
            await self.event_sink(LoaderEvent(event_type, payload))

    async def run(self, state: DonorState) -> bool:
        """Load donors into ``state``; returns whether the collection was replaced.

        A FetchFailure is logged and swallowed: the collection keeps its
        previous contents and the loading flag is always cleared.
        """
        failure: FetchFailure | None = None
        state.loading = True
        try:
            async with self.client_factory() as client:
                users = await fetch_directory_users(client, self.settings.directory_url)
            donors = donors_from_users(users, self.rng, self.settings.availability_probability)
            state.replace(donors)
            logger.info("Loaded {} donors from {}", len(donors), self.settings.directory_url)
        except FetchFailure as exc:
            log_fetch_error("DonorLoader.run", exc)
            failure = exc
        finally:
            state.loading = False

        # Events go out after the flag is cleared so listeners re-render the final state.
        if failure is not None:
            await self._emit("donors_load_failed", {"error": str(failure)})
            return False
        await self._emit("donors_loaded", {"count": len(state.donors)})
        return True
