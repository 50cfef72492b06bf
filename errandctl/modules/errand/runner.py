from errandctl.modules.api.models import (
    ErrandInvocation,
    ErrandResult,
    ErrandStatus,
    classify_exit_code,
)
from errandctl.modules.director.interfaces import ExecuteErrand
from errandctl.modules.downloader.interfaces import DownloadBlob
from errandctl.modules.ui.interfaces import UI

from .errors import ErrandCanceledError, ErrandFailedError


class ErrandRunner:
    def __init__(self, deployment: ExecuteErrand, downloader: DownloadBlob, ui: UI):
        """
        Initialize errand runner.

        Args:
            deployment: Remote execution collaborator
            downloader: Blob download collaborator
            ui: Output sink for errand output and status
        """
        self.deployment = deployment
        self.downloader = downloader
        self.ui = ui

    def run(self, invocation: ErrandInvocation) -> None:
        """
        Run an errand and report its outcome.

        Args:
            invocation: Errand name and run options

        Raises:
            ErrandFailedError: exit code 1-128
            ErrandCanceledError: exit code above 128
            Any error from the deployment or downloader, unchanged

        Logic:
        1. Run the errand (errors propagate before anything is shown)
        2. Show stdout/stderr for every exit code
        3. On success show the status line and download logs if requested
        4. Otherwise raise the matching errand error
        """
        name = invocation.name
        result = self.deployment.run_errand(name, invocation.keep_alive)

        status = classify_exit_code(result.exit_code)

        self._render_output(result)

        if status == ErrandStatus.FAILURE:
            raise ErrandFailedError(name, result.exit_code)

        if status == ErrandStatus.CANCELED:
            raise ErrandCanceledError(name, result.exit_code)

        self.ui.say(f"Errand '{name}' completed successfully (exit code {result.exit_code})")

        if invocation.download_logs and result.has_logs:
            self.downloader.download(
                result.logs_blobstore_id,
                result.logs_sha1,
                name,
                invocation.logs_directory,
            )

    def _render_output(self, result: ErrandResult) -> None:
        """Show captured output; empty streams produce no lines at all."""
        if result.stdout:
            self.ui.say("[stdout]")
            self.ui.say(result.stdout)

        if result.stderr:
            self.ui.say("[stderr]")
            self.ui.say(result.stderr)
