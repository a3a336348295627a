"""Subprocess adapter for ToolRunnerProtocol."""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import TYPE_CHECKING

from bundledruntime.domain.exceptions import FilesystemFailureError, ToolNotFoundError
from bundledruntime.domain.model.tool_outcome import ToolOutcome

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)


class SubprocessToolRunner:
    """Runs a tool to completion, buffering stdout and stderr in memory.

    No timeout: the run ends when the tool exits or the host kills us.
    """

    def run(self, executable: Path, args: Sequence[str]) -> ToolOutcome:
        """Run executable synchronously and capture its output.

        Args:
            executable: Tool path
            args: Arguments after the executable

        Returns:
            ToolOutcome with exit code, stdout and stderr

        Raises:
            ToolNotFoundError: If executable does not exist at launch
            FilesystemFailureError: If executable exists but cannot be launched
                (not executable, permission denied)
        """
        command = [str(executable), *args]
        logger.debug("running: %s", shlex.join(command))
        try:
            completed = subprocess.run(  # noqa: S603
                command,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except FileNotFoundError as exc:
            raise ToolNotFoundError(executable.name, executable) from exc
        except OSError as exc:
            raise FilesystemFailureError(executable, "Cannot execute tool") from exc

        logger.debug("%s exited with %d", executable.name, completed.returncode)
        return ToolOutcome(
            exit_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
