from assessment_api.models.models import (
    Base,
    GeneratedReport,
    User,
)

__all__ = [
    "Base",
    "User",
    "GeneratedReport",
]
