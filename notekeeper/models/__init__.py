# SQLAlchemy models package
