# missionops/errors.py
"""
Error taxonomy shared by the services and the HTTP boundary.

ValidationError        -> malformed/missing input, user can correct it
NotFoundError          -> stale reference, caller should refresh
InvalidTransitionError -> task state machine rule violation
ConflictError          -> lost a race or an active dependency blocks the write
PersistenceError       -> the store failed; cause kept on __cause__
"""
from __future__ import annotations


class MissionOpsError(Exception):
    status_code = 500
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MissionOpsError):
    status_code = 400
    kind = "validation"


class NotFoundError(MissionOpsError):
    status_code = 404
    kind = "not_found"


class InvalidTransitionError(MissionOpsError):
    status_code = 422
    kind = "invalid_transition"


class ConflictError(MissionOpsError):
    status_code = 409
    kind = "conflict"


class PersistenceError(MissionOpsError):
    status_code = 503
    kind = "persistence"
