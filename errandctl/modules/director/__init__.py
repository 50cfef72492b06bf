"""
Director Module - Black Box Interface

Purpose: Run errands on a remote deployment
Interface: ExecuteErrand.run_errand(name, keep_alive) -> ErrandResult
Hidden: HTTP transport, task polling, result decoding

Can be replaced with any other execution mechanism implementing ExecuteErrand.
"""

from .client import DirectorDeployment, create_http_client
from .interfaces import DirectorError, ExecuteErrand

__all__ = ["DirectorDeployment", "DirectorError", "ExecuteErrand", "create_http_client"]
