import httpx
from fastapi import Request
from starlette.responses import JSONResponse
import logging
logging.basicConfig(level=logging.INFO)

import config

SYNC_TOUR_PATH = "/wholesalers/{wholesaler_id}/sync/tour"


def build_target_url(upstream_url, wholesaler_id):
    return upstream_url.rstrip("/") + SYNC_TOUR_PATH.format(wholesaler_id=wholesaler_id)


async def forward_request(request: Request, wholesaler_id, upstream_url):
    try:
        body = await request.json()

        url = build_target_url(upstream_url, wholesaler_id)
        if config.DEBUG:
            logging.info(f"Forwarding request to URL: {url}")

        headers = {"Content-Type": "application/json"}
        authorization = request.headers.get("authorization")
        if authorization:
            headers["Authorization"] = authorization

        async with httpx.AsyncClient(follow_redirects=True) as client:
            response = await client.post(url, json=body, headers=headers)

        # Backend error statuses are relayed as-is; only exceptions become a 500.
        data = response.json()
        if config.DEBUG:
            logging.info(f"Response: {response.status_code} {data}")
        return JSONResponse(status_code=response.status_code, content=data)

    except Exception as e:
        logging.error(f"Sync tour error: {e!r}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": str(e) or "Internal server error"},
        )
