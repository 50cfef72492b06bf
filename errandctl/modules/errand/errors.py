"""Errors raised when an errand ran but did not succeed."""

from errandctl.modules.api.models import ErrandStatus


class ErrandError(Exception):
    """Base class for errand outcomes that are not a success."""

    status: ErrandStatus = ErrandStatus.FAILURE
    message_template = "Errand '{name}' did not succeed (exit code {exit_code})"

    def __init__(self, errand_name: str, exit_code: int):
        self.errand_name = errand_name
        self.exit_code = exit_code
        super().__init__(self.message_template.format(name=errand_name, exit_code=exit_code))


class ErrandFailedError(ErrandError):
    """Errand exited with a code between 1 and 128."""

    status = ErrandStatus.FAILURE
    message_template = "Errand '{name}' completed with error (exit code {exit_code})"


class ErrandCanceledError(ErrandError):
    """Errand was terminated by a signal (exit code above 128)."""

    status = ErrandStatus.CANCELED
    message_template = "Errand '{name}' was canceled (exit code {exit_code})"
