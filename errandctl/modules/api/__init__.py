"""
API Module - Black Box Interface

Purpose: Shared data models for errand runs
Interface: ErrandInvocation, ErrandResult, ErrandStatus, TaskState, classify_exit_code
Hidden: Validation and wire payload normalization
"""

from .models import (
    MAX_FAILURE_EXIT_CODE,
    ErrandInvocation,
    ErrandResult,
    ErrandStatus,
    TaskState,
    classify_exit_code,
)

__all__ = [
    "MAX_FAILURE_EXIT_CODE",
    "ErrandInvocation",
    "ErrandResult",
    "ErrandStatus",
    "TaskState",
    "classify_exit_code",
]
