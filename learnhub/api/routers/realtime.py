"""
Live collection updates over WebSocket.

Routes: WS /ws/{collection}

The client identifies itself with a user_id query parameter (browsers cannot
set headers on WebSocket handshakes) or the X-User-ID header. It receives the
full snapshot of its records on connect and after every change.

Dependencies: learnhub.boundary.db.document_store
System role: Realtime subscription HTTP API
"""

import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from fastapi.encoders import jsonable_encoder

from learnhub.api.deps import USER_ID_HEADER, get_document_store
from learnhub.boundary.db.document_store import DocumentStore, Snapshot

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])


@router.websocket("/ws/{collection}")
async def watch_collection(
    websocket: WebSocket,
    collection: str,
    store: DocumentStore = Depends(get_document_store),
) -> None:
    user_id = (
        websocket.query_params.get("user_id") or websocket.headers.get(USER_ID_HEADER) or ""
    ).strip()
    if not user_id or collection not in store.collections():
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()

    async def send_snapshot(snapshot: Snapshot) -> None:
        await websocket.send_json(
            {"collection": collection, "records": jsonable_encoder(snapshot)}
        )

    unsubscribe = await store.subscribe(collection, user_id, send_snapshot)
    logger.info(f"{__name__}:watch_collection - OPEN collection={collection} user_id={user_id}")
    try:
        while True:
            message = await websocket.receive_text()
            if message == "ping":
                await websocket.send_text("pong")
    except WebSocketDisconnect:
        pass
    finally:
        unsubscribe()
        logger.info(f"{__name__}:watch_collection - CLOSED collection={collection}")
