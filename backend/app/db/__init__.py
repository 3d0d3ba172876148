"""
Data module for the Land Records backend

Contains the in-memory store, repository contracts and seed data.
"""
from app.db.store import DataStore, get_store
from app.db.seed_data import seed_all, clear_all

__all__ = ["DataStore", "get_store", "seed_all", "clear_all"]
