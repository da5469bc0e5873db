from __future__ import annotations
"""Exception hierarchy shared by the config, listing and download layers."""

LOGIN_HINT = "run `storacha-rclone login` again"


class StorachaError(RuntimeError):
    """Base class for every failure reported by storacha-rclone."""

    exit_code = 1


class UsageError(StorachaError):
    """Raised when a command is invoked with unusable arguments."""

    exit_code = 2


class ConfigEnvironmentError(StorachaError):
    """Raised when the home directory or config directory is unavailable."""


class ConfigWriteError(StorachaError):
    """Raised when the credential file cannot be written or renamed."""


class ConfigMissingError(StorachaError):
    """Raised when no readable credential file exists."""

    def __init__(self, path: object, reason: str | None = None):
        message = f"cannot read config {path}"
        if reason:
            message += f": {reason}"
        super().__init__(f"{message} ({LOGIN_HINT})")
        self.path = path


class ConfigIncompleteError(StorachaError):
    """Raised when the credential file lacks one or more required fields."""

    def __init__(self, path: object, missing: list[str] | tuple[str, ...] = ()):
        detail = f" (missing: {', '.join(missing)})" if missing else ""
        super().__init__(f"config {path} is incomplete{detail}, {LOGIN_HINT}")
        self.path = path
        self.missing = tuple(missing)


class AuthConfigError(StorachaError):
    """Raised when a storage client cannot be built from the saved credentials."""


class RemoteListError(StorachaError):
    """Raised when a listing page cannot be fetched."""


class RemoteFetchError(StorachaError):
    """Raised when an object cannot be opened on the remote side."""


class LocalCreateError(StorachaError):
    """Raised when the download destination cannot be created."""


class CopyError(StorachaError):
    """Raised when a download is interrupted mid-transfer."""
