"""Shared API schemas."""

from __future__ import annotations

from .problem_details import ProblemDetails, ValidationErrorDetail, ValidationProblemDetails

__all__ = ["ProblemDetails", "ValidationErrorDetail", "ValidationProblemDetails"]
