"""Activity use cases."""

from collab.application.usecase.activity.get_activity import (
    ActivityItem,
    GetActivityRequest,
    GetActivityResponse,
    GetActivityUseCase,
)

__all__ = [
    "ActivityItem",
    "GetActivityRequest",
    "GetActivityResponse",
    "GetActivityUseCase",
]
