"""Pydantic models for extractor output (stop sequence JSON and bus schedule JSON)."""
from typing import Any

from pydantic import BaseModel


class StopRecord(BaseModel):
    index: int
    name: str
    time: str | None
    lat: float | None
    lng: float | None
    place_id: str | None


class StopSequenceResult(BaseModel):
    route: str | None
    stop_sequence: list[StopRecord]
    count: int
    source_path: list[Any] | None
    origin_destination_path: list[Any] | None


class TimetableEntry(BaseModel):
    mode: str = "Bus"
    route: str
    towords: str  # destination/stop label, field name kept for downstream consumers
    time: str


class BusSchedule(BaseModel):
    place: str
    buses: list[str]
    timetable: list[TimetableEntry]
