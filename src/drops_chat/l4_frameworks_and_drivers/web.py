"""FastAPI transport boundary — (de)serialization and error-to-status mapping only."""

from __future__ import annotations

import json
import logging

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse

from drops_chat.l1_entities.errors import PayloadTooLarge, StorageUnavailable, UpstreamError, ValidationError
from drops_chat.l1_entities.message import ChatExchange, Message
from drops_chat.l4_frameworks_and_drivers.container import DependencyContainer

log = logging.getLogger('drops.web')

STREAM_MEDIA_TYPE = 'text/plain; charset=utf-8'
STREAM_HEADERS = {'Cache-Control': 'no-cache', 'X-Accel-Buffering': 'no'}


def _error_response(exc: Exception, failure_text: str) -> JSONResponse:
    """Map a relay error to a JSON error body. Client errors keep their message."""
    if isinstance(exc, (ValidationError, PayloadTooLarge)):
        log.info('Rejected request: %s', exc)
        return JSONResponse({'error': str(exc)}, status_code=400)
    log.error('%s: %s: %s', failure_text, type(exc).__name__, exc)
    return JSONResponse({'error': failure_text}, status_code=500)


def create_app(container: DependencyContainer) -> FastAPI:
    """Build the HTTP app around an already-wired container."""
    controller = container.controller
    max_audio_bytes = container.config.transcription.max_audio_bytes
    app = FastAPI(title='drops-chat')
    app.state.container = container

    if container.infra.server.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=container.infra.server.cors_origins,
            allow_methods=['*'],
            allow_headers=['*'],
        )

    @app.get('/api/messages', response_model=list[Message])
    async def list_messages():
        try:
            return await controller.list_messages()
        except StorageUnavailable as e:
            return _error_response(e, 'Failed to fetch messages')

    @app.post('/api/messages', response_model=ChatExchange)
    async def send_message(request: Request):
        try:
            return await controller.send_message(await _read_json(request))
        except (ValidationError, UpstreamError, StorageUnavailable) as e:
            return _error_response(e, 'Failed to process message')

    @app.post('/api/messages/stream')
    async def stream_message(request: Request):
        try:
            fragments = await controller.stream_message(await _read_json(request))
        except (ValidationError, UpstreamError, StorageUnavailable) as e:
            return _error_response(e, 'Failed to process message')
        return StreamingResponse(fragments, media_type=STREAM_MEDIA_TYPE, headers=STREAM_HEADERS)

    @app.post('/api/messages/audio')
    async def send_audio(audio: UploadFile | None = File(None)):
        try:
            if audio is None:
                raise ValidationError('No audio file provided')
            data = await _read_upload(audio, max_audio_bytes)
            fragments = await controller.send_audio(data, audio.filename or 'recording.webm', audio.content_type)
        except (ValidationError, PayloadTooLarge, UpstreamError, StorageUnavailable) as e:
            return _error_response(e, 'Failed to process audio')
        return StreamingResponse(fragments, media_type=STREAM_MEDIA_TYPE, headers=STREAM_HEADERS)

    return app


async def _read_json(request: Request) -> object:
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError('Request body is not valid JSON') from e


async def _read_upload(upload: UploadFile, limit: int) -> bytes:
    """Read an upload, refusing anything over *limit* bytes without buffering it all."""
    if upload.size is not None and upload.size > limit:
        raise PayloadTooLarge(upload.size, limit)
    data = await upload.read(limit + 1)
    if len(data) > limit:
        raise PayloadTooLarge(upload.size or len(data), limit)
    return data
