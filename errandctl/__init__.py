"""
errandctl - Errand Runner for Director Deployments

Runs a named errand on a remote deployment, reports its outcome and
optionally fetches the logs it produced.

Architecture:
- Each module is self-contained with clear interfaces
- Collaborators are injected, never imported by the core
- No module knows the internals of another

Modules:
- api: Shared data models
- errand: Errand execution and outcome classification
- director: Remote execution against the director
- downloader: Blob download and checksum verification
- ui: User-facing output
"""

__version__ = "1.0.0"
