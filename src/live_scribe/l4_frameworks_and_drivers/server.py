"""FastAPI app factory — thin routes over HttpController."""

from __future__ import annotations

import json

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from live_scribe import __version__
from live_scribe.l1_entities.errors import ValidationError
from live_scribe.l1_entities.transcription import AudioPayload
from live_scribe.l3_interface_adapters.controllers.http_controller import HttpController, error_response


def _error(error: Exception) -> PlainTextResponse:
    status, message = error_response(error)
    return PlainTextResponse(message, status_code=status)


def create_app(controller: HttpController) -> FastAPI:
    app = FastAPI(title='live-scribe', version=__version__)
    app.state.controller = controller

    @app.get('/health')
    async def health() -> dict[str, str]:
        return {'status': 'ok'}

    @app.post('/transcribe')
    async def transcribe(request: Request):
        try:
            form = await request.form()
            upload = form.get('file')
            if upload is None or isinstance(upload, str):
                return PlainTextResponse('Missing file', status_code=400)
            payload = AudioPayload(
                filename=upload.filename or 'audio',
                content=await upload.read(),
                content_type=upload.content_type or 'application/octet-stream',
            )
            return JSONResponse(await controller.transcribe(payload))
        except Exception as e:
            return _error(e)

    @app.post('/summarize')
    async def summarize(request: Request):
        try:
            try:
                body = await request.json()
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise ValidationError('Invalid JSON body') from e
            return JSONResponse(await controller.summarize(body))
        except Exception as e:
            return _error(e)

    return app
