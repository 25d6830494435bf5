"""
Shared base for the transactions and users tables.
Every model imports Base from here so they share one registry and metadata.
"""
from sqlalchemy.orm import registry

mapper_registry = registry()
Base = mapper_registry.generate_base()
