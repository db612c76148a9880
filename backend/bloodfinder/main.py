from __future__ import annotations

import asyncio
from typing import Any, Dict

import socketio
from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware

from .agents.donor_loader import DonorLoader, LoaderEvent
from .config import settings
from .memory.donor_state import donor_state
from .routers import donor, page
from .utils.logging import configure_logging


class LiveUpdateHub:
    def __init__(self, sio_server: socketio.AsyncServer) -> None:
        self.sio = sio_server
        self.websockets: set[WebSocket] = set()

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.websockets.add(websocket)

    def disconnect(self, websocket: WebSocket) -> None:
        self.websockets.discard(websocket)

    async def notify(self, event: str, payload: Dict[str, Any]) -> None:
        message = {"event": event, "payload": payload}
        stale = []
        for connection in list(self.websockets):
            try:
                await connection.send_json(message)
            except Exception:
                stale.append(connection)
        for connection in stale:
            self.disconnect(connection)
        await self.sio.emit(event, payload)

    async def loader_event(self, event: LoaderEvent) -> None:
        await self.notify(event.type, event.payload)


configure_logging(settings.log_level)

sio = socketio.AsyncServer(async_mode="asgi", cors_allowed_origins="*")
app = FastAPI(title="Community Blood Donor Finder", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

hub = LiveUpdateHub(sio)
loader = DonorLoader(settings, hub.loader_event)
running_tasks: set[asyncio.Task] = set()

donor.init_router(hub)

app.include_router(page.router)
app.include_router(donor.router)


@app.get("/health")
async def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}


@app.websocket("/ws/donors")
async def donor_websocket(websocket: WebSocket) -> None:
    await hub.connect(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        hub.disconnect(websocket)


@app.on_event("startup")
async def load_donors_on_startup() -> None:
    # Served pages show the loading indicator until this task finishes.
    task = asyncio.create_task(loader.run(donor_state))
    running_tasks.add(task)
    task.add_done_callback(running_tasks.discard)


socket_app = socketio.ASGIApp(sio, other_asgi_app=app)
