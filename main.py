from fastapi import FastAPI, Request
import uvicorn

import config
from forwarder import forward_request


def create_app(upstream_url: str = config.UPSTREAM_URL) -> FastAPI:
    app = FastAPI()
    app.state.upstream_url = upstream_url

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    @app.post("/wholesalers/{wholesaler_id}/sync/tour")
    async def sync_tour(wholesaler_id: str, request: Request):
        return await forward_request(request, wholesaler_id, request.app.state.upstream_url)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT)
