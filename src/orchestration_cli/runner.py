"""Run one external command with the terminal's stdio attached."""

from __future__ import annotations

import shlex
import subprocess
from typing import Sequence


class RunnerError(RuntimeError):
    pass


class CommandFailed(RunnerError):
    def __init__(self, argv: Sequence[str], returncode: int) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(f"Command failed with exit code {returncode}: {argv[0]}")


class SpawnError(RunnerError):
    def __init__(self, argv: Sequence[str], error: OSError) -> None:
        self.argv = list(argv)
        self.binary = argv[0]
        self.error = error
        super().__init__(f"Could not start {argv[0]!r}: {error.strerror or error}")


def run_command(argv: Sequence[str]) -> None:
    """Run ``argv`` to completion; raise unless it exits with status 0."""

    print(f"[run] {shlex.join(argv)}")
    try:
        subprocess.run(list(argv), check=True)
    except subprocess.CalledProcessError as exc:
        raise CommandFailed(argv, exc.returncode) from exc
    except OSError as exc:
        raise SpawnError(argv, exc) from exc
