"""Go toolchain queries used to locate the project root."""

import os
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional

from golessons.errors import ToolchainError

NOT_IN_MODULE_MESSAGE = "not inside a Go module\n\n  try `go mod init` to setup"


@dataclass(frozen=True)
class GoModuleInfo:
    """What `go env` reports about the current directory."""
    version: str
    gomod: str

    @property
    def in_module(self) -> bool:
        return self.gomod not in ("", os.devnull)


class GoEnvironment:
    """Runs `go env` against the current working directory."""

    def __init__(self, go_binary: str = "go", cwd: Optional[str] = None):
        self._go_binary = go_binary
        self._cwd = cwd

    def query(self) -> GoModuleInfo:
        """Ask Go for its version and the enclosing go.mod path.

        Raises:
            ToolchainError: If Go is missing or `go env` fails
        """
        if shutil.which(self._go_binary) is None:
            raise ToolchainError("Go is not installed")
        try:
            result = subprocess.run(
                [self._go_binary, "env", "GOVERSION", "GOMOD"],
                capture_output=True, text=True, cwd=self._cwd,
            )
        except OSError as exc:
            raise ToolchainError(f"Go is not installed ({exc})") from exc
        if result.returncode != 0:
            raise ToolchainError(f"`go env` failed: {result.stderr.strip()}")
        return _parse_go_env(result.stdout)


def _parse_go_env(stdout: str) -> GoModuleInfo:
    lines = stdout.splitlines()
    version = lines[0].strip() if lines else ""
    gomod = lines[1].strip() if len(lines) > 1 else ""
    return GoModuleInfo(version=version.removeprefix("go"), gomod=gomod)


def resolve_project_root(environment: GoEnvironment, console=None) -> str:
    """Return the directory holding the enclosing go.mod.

    Raises:
        ToolchainError: If Go is unavailable or no module encloses the cwd
    """
    info = environment.query()
    if not info.in_module:
        raise ToolchainError(NOT_IN_MODULE_MESSAGE)
    if console is not None:
        console.info(f"Using Go {info.version} module {info.gomod}")
    return os.path.dirname(os.path.abspath(info.gomod))
