"""
core/errors.py
────────────────────────────────────────────────────────────────────────
Error taxonomy shared by the calculator, the catalog and the API layer.

Every error carries a machine-readable `kind` and the HTTP status the API
renders it with; `to_dict()` is the structured body returned to callers.
"""

from __future__ import annotations


class NutritionError(Exception):
    kind = "NutritionError"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {"error": {"kind": self.kind, "message": self.message}}


class InvalidProfile(NutritionError):
    """Missing, non-numeric or non-positive biometric field."""
    kind = "InvalidProfile"


class UnknownActivityLevel(NutritionError):
    kind = "UnknownActivityLevel"


class InvalidRequest(NutritionError):
    """Request body failed schema validation outside the profile numerics."""
    kind = "InvalidRequest"


class PlanNotFound(NutritionError):
    kind = "PlanNotFound"
    status_code = 404
