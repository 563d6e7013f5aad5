"""Engine error taxonomy for collaborator failures.

Data-quality problems never raise (they degrade to default points) and
disallowed transitions are a TransitionResult, so only I/O failures and
missing records appear here.
"""

from __future__ import annotations


class EngineError(Exception):
    """Base class for errors the service layer raises to its callers."""


class ObstacleNotFoundError(EngineError):
    def __init__(self, obstacle_id: str) -> None:
        super().__init__(f"Obstacle {obstacle_id} not found")
        self.obstacle_id = obstacle_id


class StoreWriteError(EngineError):
    """The obstacle store rejected or failed a write. Retryable from the caller's view."""

    user_message = "Failed to update obstacle status. Please try again."

    def __init__(self, obstacle_id: str, cause: str) -> None:
        super().__init__(f"Store write failed for obstacle {obstacle_id}: {cause}")
        self.obstacle_id = obstacle_id
        self.cause = cause
