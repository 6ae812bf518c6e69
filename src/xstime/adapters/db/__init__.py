"""SQLAlchemy bindings for xstime values."""
