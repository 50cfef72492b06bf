"""
errandctl shared data models.

These models define the structure of all data passed between
the errand runner and its collaborators.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

# Exit codes above this value mean the errand was killed by a signal (128 + n)
MAX_FAILURE_EXIT_CODE = 128

# Enums


class ErrandStatus(str, Enum):
    """Outcome of an errand run."""

    SUCCESS = "success"
    FAILURE = "failure"
    CANCELED = "canceled"


class TaskState(str, Enum):
    """State of a director task."""

    QUEUED = "queued"
    PROCESSING = "processing"
    CANCELLING = "cancelling"
    DONE = "done"
    ERROR = "error"
    CANCELLED = "cancelled"
    TIMEOUT = "timeout"

    @property
    def is_finished(self) -> bool:
        return self in (TaskState.DONE, TaskState.ERROR, TaskState.CANCELLED, TaskState.TIMEOUT)


def classify_exit_code(exit_code: int) -> ErrandStatus:
    """
    Map an errand exit code to its outcome.

    0 is success, anything up to and including 128 is a failure and
    anything above 128 means the errand was canceled.
    """
    if exit_code == 0:
        return ErrandStatus.SUCCESS
    if exit_code > MAX_FAILURE_EXIT_CODE:
        return ErrandStatus.CANCELED
    return ErrandStatus.FAILURE


# Input Models


class ErrandInvocation(BaseModel):
    """Request to run an errand."""

    name: str = Field(..., description="Errand name", min_length=1)
    keep_alive: bool = Field(
        default=False, description="Keep errand instances running after completion"
    )
    download_logs: bool = Field(default=False, description="Download logs after a successful run")
    logs_directory: str = Field(default=".", description="Destination directory for logs")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Reject whitespace-only names."""
        if not v.strip():
            raise ValueError("Errand name must not be blank")
        return v


# Result Models


class ErrandResult(BaseModel):
    """Result of an errand run as reported by the director."""

    exit_code: int = Field(..., description="Errand process exit code")
    stdout: str = Field(default="", description="Captured standard output")
    stderr: str = Field(default="", description="Captured standard error")
    logs_blobstore_id: str = Field(default="", description="Blob ID of the logs bundle")
    logs_sha1: str = Field(default="", description="SHA-1 of the logs bundle")

    @field_validator("stdout", "stderr", "logs_blobstore_id", "logs_sha1", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        """Absent values are represented as empty strings."""
        return "" if v is None else v

    @property
    def status(self) -> ErrandStatus:
        return classify_exit_code(self.exit_code)

    @property
    def has_logs(self) -> bool:
        """Logs are available only when both the blob ID and checksum are set."""
        return bool(self.logs_blobstore_id) and bool(self.logs_sha1)

    @classmethod
    def from_director_payload(cls, data: Dict[str, Any]) -> "ErrandResult":
        """Create from a director task result record."""
        logs: Optional[Dict[str, Any]] = data.get("logs") or {}
        return cls(
            exit_code=data["exit_code"],
            stdout=data.get("stdout"),
            stderr=data.get("stderr"),
            logs_blobstore_id=logs.get("blobstore_id"),
            logs_sha1=logs.get("sha1"),
        )
