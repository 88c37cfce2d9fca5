"""In-memory workout collection used for demo mode and tests."""

from __future__ import annotations

import copy
import logging
import uuid
from typing import Any, Dict, List

from workout_log.entity.client import EntityAPIError, EntityResponse

logger = logging.getLogger(__name__)

DEMO_WORKOUTS: List[Dict[str, Any]] = [
    {
        "date": "2024-01-01T00:00:00+00:00",
        "name": "Leg Day",
        "duration": 55,
        "exercises": [
            {"name": "Squats", "sets": [{"reps": 10, "weight": 50}, {"reps": 8, "weight": 60}]},
            {"name": "Lunges", "sets": [{"reps": 12, "weight": 20}]},
            {"name": "Leg Press", "sets": [{"reps": 12, "weight": 90}]},
            {"name": "Calf Raises", "sets": [{"reps": 15, "weight": 30}]},
        ],
        "notes": "Felt strong on the last squat set.",
    },
    {
        "date": "2024-01-03T00:00:00+00:00",
        "name": "Upper Body",
        "duration": 40,
        "exercises": [
            {"name": "Bench Press", "sets": [{"reps": 8, "weight": 60}]},
            {"name": "Rows", "sets": [{"reps": 10, "weight": 45}]},
        ],
    },
    {
        "date": "2024-01-04T00:00:00+00:00",
        "name": "Cardio",
        "exercises": [{"name": "Running", "sets": [{"duration": 1800}]}],
    },
]


class InMemoryEntityClient:
    """
    Dict-backed implementation of the entity client contract.

    Records are stored in insertion order and returned as deep copies so
    callers cannot mutate the stored state.
    """

    def __init__(self) -> None:
        self._records: Dict[str, Dict[str, Any]] = {}

    def seed(self, records: List[Dict[str, Any]]) -> None:
        for record in records:
            record_id = str(record.get("id") or uuid.uuid4())
            self._records[record_id] = {**copy.deepcopy(record), "id": record_id}

    def get_all(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(list(self._records.values()))

    async def list(self) -> EntityResponse:
        return EntityResponse(success=True, data=self.get_all())

    async def create(self, data: Dict[str, Any]) -> EntityResponse:
        record_id = str(uuid.uuid4())
        record = {**copy.deepcopy(data), "id": record_id}
        self._records[record_id] = record
        logger.info("Created workout %s", record_id)
        return EntityResponse(success=True, data=copy.deepcopy(record))

    async def update(self, record_id: str, data: Dict[str, Any]) -> EntityResponse:
        if record_id not in self._records:
            raise EntityAPIError(f"Workout {record_id} not found", 404)
        record = {**copy.deepcopy(data), "id": record_id}
        self._records[record_id] = record
        logger.info("Updated workout %s", record_id)
        return EntityResponse(success=True, data=copy.deepcopy(record))

    async def delete(self, record_id: str) -> EntityResponse:
        if self._records.pop(record_id, None) is None:
            raise EntityAPIError(f"Workout {record_id} not found", 404)
        logger.info("Deleted workout %s", record_id)
        return EntityResponse(success=True)
