"""Exception hierarchy for content-checker."""


class CheckerError(Exception):
    """Base class for content-checker errors."""
    pass


class ConfigError(CheckerError):
    """Invalid checker configuration."""
    pass


class ChangedFilesError(CheckerError):
    """The version-control query for changed files failed."""
    pass
