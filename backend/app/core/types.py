"""Shared value types and id/time helpers used by the in-memory models"""
from dataclasses import dataclass
from datetime import datetime
import uuid


def generate_uuid() -> str:
    """Generate a UUID string"""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.utcnow()


@dataclass(frozen=True)
class GeoPoint:
    """WGS84 coordinate"""
    lat: float
    lng: float
