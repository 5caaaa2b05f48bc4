"""Tests for the HTTP extraction endpoints."""
import asyncio
import json
import time

import httpx
import pytest
from fastapi.testclient import TestClient

import main

from builders import schedule_row, with_xssi


@pytest.fixture
def client():
    return TestClient(main.app)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_extract_stops(client, transit_lines):
    r = client.post("/extract/stops", content=with_xssi(transit_lines))
    assert r.status_code == 200
    data = r.json()
    assert data["count"] == 7
    assert data["route"] == "600-FC"
    assert data["stop_sequence"][-1]["name"] == "Jigani APC Circle"


def test_extract_schedule(client, place_preview):
    r = client.post("/extract/schedule", content=with_xssi(place_preview))
    assert r.status_code == 200
    assert r.json()["buses"] == ["355-A", "600-FC", "BC-3A"]


def test_invalid_body_is_400(client):
    r = client.post("/extract/stops", content=")]}'\n[1, 2")
    assert r.status_code == 400
    r = client.post("/extract/schedule", content="")
    assert r.status_code == 400


def test_no_structure_is_404(client):
    r = client.post("/extract/stops", content="[[1, 2, 3]]")
    assert r.status_code == 404
    assert "stop sequence" in r.json()["detail"]
    r = client.post("/extract/schedule", content="[[1, 2, 3]]")
    assert r.status_code == 404


def _nested(node, depth):
    for _ in range(depth):
        node = [node]
    return node


def test_health_answers_while_large_schedule_is_extracted():
    """Extraction runs in the threadpool, so other requests are served meanwhile."""
    row = schedule_row("600-FC", "Jigani APC Circle", "8:00 AM")
    body = json.dumps([_nested(row, 10) for _ in range(10_000)])

    async def run():
        done: dict[str, float] = {}
        transport = httpx.ASGITransport(app=main.app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:

            async def post_schedule():
                r = await ac.post("/extract/schedule", content=body)
                done["schedule"] = time.perf_counter()
                return r

            schedule_task = asyncio.create_task(post_schedule())
            await asyncio.sleep(0.05)
            health_start = time.perf_counter()
            health = await ac.get("/health")
            done["health"] = time.perf_counter()
            schedule = await schedule_task
        return schedule, health, done["health"] - health_start, done

    schedule, health, health_latency, done = asyncio.run(run())
    assert schedule.status_code == 200
    assert schedule.json()["buses"] == ["600-FC"]
    assert health.status_code == 200
    assert done["health"] < done["schedule"]
    assert health_latency < 0.5
