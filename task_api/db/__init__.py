"""Database package — SQLAlchemy declarative Base."""
