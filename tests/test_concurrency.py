"""Tests that slow storage calls do not block other requests."""

import asyncio
import time

import httpx
import pytest

from database import ExecuteResult


@pytest.mark.asyncio
async def test_slow_queries_run_concurrently(app, db, monkeypatch):
    def slow_fetch_many(statement):
        time.sleep(0.5)
        return []

    monkeypatch.setattr(db, "fetch_many", slow_fetch_many)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        started = time.perf_counter()
        responses = await asyncio.gather(*(client.get("/api/contact/list") for _ in range(4)))
        elapsed = time.perf_counter() - started

    assert all(response.status_code == 200 for response in responses)
    # Four half-second queries served one after another would take two seconds
    assert elapsed < 1.5


@pytest.mark.asyncio
async def test_slow_audit_write_does_not_block_the_loop(notifier, db, monkeypatch):
    def slow_execute(statement):
        time.sleep(0.5)
        return ExecuteResult(inserted_id=1, rows_affected=1)

    monkeypatch.setattr(db, "execute", slow_execute)

    started = time.perf_counter()
    results = await asyncio.gather(*(notifier.send_newsletter_welcome(f"user{i}@x.com") for i in range(4)))
    elapsed = time.perf_counter() - started

    assert results == [True, True, True, True]
    assert elapsed < 1.5
