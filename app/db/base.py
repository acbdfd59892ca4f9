"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.swimming_practice import SwimmingPractice  # noqa: F401
