from __future__ import annotations
"""Persistence of the local credential record."""
import json
import logging
import os
from pathlib import Path

from .errors import (
    ConfigEnvironmentError,
    ConfigIncompleteError,
    ConfigMissingError,
    ConfigWriteError,
)
from .models import CredentialRecord

CONFIG_DIR_NAME = ".storacha-rclone"
CONFIG_FILE_NAME = "config.json"
DIR_MODE = 0o700
FILE_MODE = 0o600

LOGGER = logging.getLogger(__name__)


class ConfigStore:
    """JSON-backed store for the single :class:`CredentialRecord`.

    The record lives at ``<home>/.storacha-rclone/config.json`` unless a
    different ``config_dir`` is supplied. Each save replaces the whole
    file; there is no merging with a previous record.
    """

    def __init__(self, config_dir: str | Path | None = None):
        self._config_dir = Path(config_dir) if config_dir is not None else None

    def resolve_path(self) -> Path:
        """Return the config file path, creating its directory if needed.

        Raises:
            ConfigEnvironmentError: when the home directory cannot be
                determined or the directory cannot be created.
        """

        directory = self._config_dir
        if directory is None:
            try:
                directory = Path.home() / CONFIG_DIR_NAME
            except (RuntimeError, KeyError) as exc:
                raise ConfigEnvironmentError(f"cannot determine home directory: {exc}") from exc
        try:
            directory.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigEnvironmentError(f"cannot create config directory {directory}: {exc}") from exc
        return directory / CONFIG_FILE_NAME

    def save(self, record: CredentialRecord) -> Path:
        """Atomically replace the stored record and return the config path."""

        path = self.resolve_path()
        tmp_path = path.with_name(path.name + ".tmp")
        payload = json.dumps(record.to_dict(), indent=2).encode("utf-8")
        try:
            fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "wb") as handle:
                # A stale temp file keeps its old mode; tighten it before writing secrets.
                os.chmod(tmp_path, FILE_MODE)
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, path)
        except OSError as exc:
            self._discard(tmp_path)
            raise ConfigWriteError(f"cannot write config {path}: {exc.strerror or exc}") from exc
        LOGGER.debug("Saved credential record to %s", path)
        return path

    def load(self) -> CredentialRecord:
        """Read the stored record.

        Raises:
            ConfigMissingError: when the file is absent or unreadable.
            ConfigIncompleteError: when the document lacks a required field.
        """

        path = self.resolve_path()
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ConfigMissingError(path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigMissingError(path, str(exc)) from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigIncompleteError(path) from exc
        if not isinstance(data, dict):
            raise ConfigIncompleteError(path)
        record = CredentialRecord.from_dict(data)
        missing = record.missing_fields()
        if missing:
            raise ConfigIncompleteError(path, missing)
        LOGGER.debug("Loaded credential record from %s", path)
        return record

    @staticmethod
    def _discard(tmp_path: Path) -> None:
        try:
            tmp_path.unlink()
        except FileNotFoundError:
            return
        except OSError:
            LOGGER.warning("Could not remove temporary config file %s", tmp_path)
