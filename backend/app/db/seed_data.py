"""
Seed Data Module

Demo accounts and the sample plot the system starts with. Seed records
survive DataStore.reset(); everything else is cleared.
"""
from typing import Dict, List

from app.core.config import settings
from app.core.logging_config import logger
from app.core.security import get_password_hash
from app.core.types import GeoPoint
from app.db.store import DataStore
from app.models.user import User, UserRole
from app.models.plot import Plot, PlotType


# ==================== Sample Data Constants ====================

SAMPLE_USERS: List[Dict] = [
    {"name": "Demo Citizen", "email": settings.DEMO_CITIZEN_EMAIL,
     "password": settings.DEMO_CITIZEN_PASSWORD, "role": UserRole.CITIZEN},
    {"name": "Land Officer", "email": settings.DEMO_OFFICER_EMAIL,
     "password": settings.DEMO_OFFICER_PASSWORD, "role": UserRole.OFFICER},
    {"name": "System Admin", "email": settings.DEMO_ADMIN_EMAIL,
     "password": settings.DEMO_ADMIN_PASSWORD, "role": UserRole.ADMIN},
]

SAMPLE_PLOTS: List[Dict] = [
    {
        "plot_id": "PLOT123",
        "location": GeoPoint(lat=28.7041, lng=77.1025),
        "area": 1000,
        "plot_type": PlotType.AGRICULTURAL.value,
        "current_owner_email": settings.DEMO_CITIZEN_EMAIL,
        "status": "active",
        "boundaries": [
            GeoPoint(lat=28.7041, lng=77.1025),
            GeoPoint(lat=28.7051, lng=77.1125),
            GeoPoint(lat=28.7061, lng=77.1090),
        ],
    },
]


def seed_users(store: DataStore) -> int:
    created = 0
    for data in SAMPLE_USERS:
        if store.users.get_by_email(data["email"]) is not None:
            continue
        store.users.add(User(
            name=data["name"],
            email=data["email"],
            hashed_password=get_password_hash(data["password"]),
            role=data["role"],
            language=settings.DEFAULT_LANGUAGE,
            is_seed=True,
        ))
        created += 1
    return created


def seed_plots(store: DataStore) -> int:
    created = 0
    for data in SAMPLE_PLOTS:
        if store.plots.get(data["plot_id"]) is not None:
            continue
        store.plots.add(Plot(is_seed=True, **data))
        created += 1
    return created


def seed_all(store: DataStore) -> Dict[str, int]:
    """Insert any missing seed users and plots (idempotent)"""
    result = {"users": seed_users(store), "plots": seed_plots(store)}
    logger.info(f"[Seed] Seeded demo data: {result}")
    return result


def clear_all(store: DataStore) -> Dict[str, int]:
    """Reset the store to its seed state"""
    removed = store.reset()
    seed_all(store)
    return removed
