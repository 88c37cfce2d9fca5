from __future__ import annotations

import asyncio

import pytest

from workout_log.entity.client import EntityAPIError
from workout_log.entity.memory import DEMO_WORKOUTS, InMemoryEntityClient
from workout_log.workout.model import workout_from_payload


def test_create_update_delete_cycle() -> None:
    async def _run() -> None:
        client = InMemoryEntityClient()

        created = await client.create({"date": "2024-01-01T00:00:00+00:00", "name": "Leg Day"})
        record_id = created.data["id"]
        assert created.success

        await client.update(record_id, {"date": "2024-01-01T00:00:00+00:00", "name": "Legs"})
        listed = await client.list()
        assert [r["name"] for r in listed.data] == ["Legs"]
        assert listed.data[0]["id"] == record_id

        await client.delete(record_id)
        assert (await client.list()).data == []

        with pytest.raises(EntityAPIError):
            await client.delete(record_id)
        with pytest.raises(EntityAPIError):
            await client.update(record_id, {"name": "x"})

    asyncio.run(_run())


def test_list_returns_copies() -> None:
    client = InMemoryEntityClient()
    client.seed([{"id": "w1", "date": "2024-01-01", "name": "A", "exercises": []}])

    listed = asyncio.run(client.list())
    listed.data[0]["exercises"].append({"name": "Hack"})

    assert client.get_all()[0]["exercises"] == []


def test_demo_workouts_decode() -> None:
    client = InMemoryEntityClient()
    client.seed(DEMO_WORKOUTS)

    records = [workout_from_payload(raw) for raw in client.get_all()]

    assert len(records) == len(DEMO_WORKOUTS)
    assert all(record.id for record in records)
