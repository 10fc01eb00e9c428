from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from formkit.app.fastapi.utils import run_sync
from formkit.app.fastapi.websocket import WebsocketManager
from formkit.app.singleton import Singleton


def create() -> FastAPI:
    from formkit.app.content import DataJson, StateJson

    app = FastAPI()
    WebsocketManager().set_app(app)

    @app.post("/data")
    async def send_data(request: Request):
        return JSONResponse(content=dict(DataJson()))

    @app.post("/state")
    async def send_state(request: Request):
        return JSONResponse(content=dict(StateJson()))

    @app.middleware("http")
    async def get_state_from_request(request: Request, call_next):
        await StateJson.from_request(request)
        response = await call_next(request)
        return response

    return app


class _MainServer(metaclass=Singleton):
    def __init__(self):
        self._server = create()

    def get_server(self) -> FastAPI:
        return self._server
