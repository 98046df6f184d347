"""Run settings collected from top-level CLI options and environment variables."""

import os
from dataclasses import dataclass, field
from typing import Optional

from golessons.console import Console
from golessons.go_env import GoEnvironment, resolve_project_root

ROOT_ENVVAR = "GOLESSONS_ROOT"
GO_BINARY_ENVVAR = "GOLESSONS_GO"


@dataclass
class ScaffoldSettings:
    """Options shared by every golessons command."""
    root: Optional[str] = None
    go_binary: str = "go"
    quiet: bool = False
    console: Console = field(init=False)

    def __post_init__(self):
        self.console = Console(quiet=self.quiet)

    def resolve_root(self) -> str:
        """Return the explicit --root, or ask Go for the enclosing module's directory."""
        if self.root:
            return os.path.abspath(self.root)
        return resolve_project_root(GoEnvironment(self.go_binary), self.console)
