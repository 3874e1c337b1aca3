"""Repositories — SQLAlchemy implementations of the core repository protocols."""
