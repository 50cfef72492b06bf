"""
Errand Module - Black Box Interface

Purpose: Run one errand and turn its exit code into an outcome
Interface: ErrandRunner(deployment, downloader, ui).run(invocation)
Hidden: Exit code classification, output rendering, log download gating

Collaborators are injected, so any ExecuteErrand / DownloadBlob / UI
implementation can be plugged in.
"""

from .errors import ErrandCanceledError, ErrandError, ErrandFailedError
from .runner import ErrandRunner

__all__ = ["ErrandCanceledError", "ErrandError", "ErrandFailedError", "ErrandRunner"]
