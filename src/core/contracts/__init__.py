"""
Contract Validation Module

Validation of the JSON records exchanged with the outside world.
"""

from .validators import (
    ContractValidator,
    DoughProfileValidator,
    DEFAULT_SCHEMA_DIR,
    DOUGH_PROFILE_SCHEMA,
    SchemaLoader,
    validate_dough_profile,
)

__all__ = [
    # Constants
    "DEFAULT_SCHEMA_DIR",
    "DOUGH_PROFILE_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DoughProfileValidator",
    # Functions
    "validate_dough_profile",
]
