"""Exceptions raised while scaffolding a learning repository."""


class ScaffoldError(Exception):
    """Base class for failures that abort a golessons run."""


class ValidationError(ScaffoldError, ValueError):
    """A command argument is not a valid positive integer."""


class ToolchainError(ScaffoldError):
    """The Go toolchain is missing or the working directory is not inside a module."""


class PreconditionError(ScaffoldError):
    """A course or chapter directory that `add` relies on does not exist."""
