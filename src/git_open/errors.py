"""Error taxonomy. Every error here is fatal to a git-open run."""


class GitOpenError(RuntimeError):
    """Base class for errors reported to the user by the CLI."""


class ResolutionError(GitOpenError):
    """Raised when the current branch or push remote cannot be determined."""


class NotFoundError(GitOpenError):
    """Raised when a GitLab lookup yields no usable result."""


class LaunchError(GitOpenError):
    """Raised when the URL opener cannot be started or exits non-zero."""
