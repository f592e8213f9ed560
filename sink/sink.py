# -------------------------
# Author: Jeevan Reji (modified)
# Date: 2026-10-19
# -------------------------
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from typing import Dict, List
from threading import Lock
import json, os

app = FastAPI(title="Points Sink")

PORT = int(os.environ.get("SINK_PORT", 8080))


class PointIn(BaseModel):
    value: float
    metric: str
    tags: Dict[str, str]
    timestamp: int


# -------------------------
# In-memory counters (nothing is stored)
# -------------------------
lock = Lock()
stats = {"requests": 0, "points": 0, "keyspaces": {}}


def reset_stats():
    with lock:
        stats["requests"] = 0
        stats["points"] = 0
        stats["keyspaces"] = {}


def record(points: List[PointIn]):
    with lock:
        stats["requests"] += 1
        stats["points"] += len(points)
        for p in points:
            ks = p.tags.get("ksid", "")
            stats["keyspaces"][ks] = stats["keyspaces"].get(ks, 0) + 1


@app.get("/health")
async def health():
    return {"status": "ok", "port": PORT}


@app.get("/stats")
async def get_stats():
    with lock:
        return {
            "requests": stats["requests"],
            "points": stats["points"],
            "keyspaces": dict(stats["keyspaces"]),
        }


@app.post("/api/put")
async def put(request: Request):
    # Generators POST a JSON array of points here. 204 on success,
    # 400 with an error body otherwise (reported by the client, not fatal).
    raw = await request.body()
    try:
        data = json.loads(raw)
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": f"invalid json: {e}"})
    if not isinstance(data, list):
        return JSONResponse(status_code=400, content={"error": "expected a JSON array of points"})
    try:
        points = [PointIn.model_validate(d) for d in data]
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": "invalid point", "details": json.loads(e.json())})

    missing = [i for i, p in enumerate(points) if set(p.tags) != {"ksid", "host"}]
    if missing:
        return JSONResponse(status_code=400, content={"error": "points must carry exactly ksid and host tags",
                                                      "points": missing[:10]})
    record(points)
    print(f"[sink:{PORT}] accepted {len(points)} points")
    return Response(status_code=204)
