"""Per-user preferences for swiftfw.

Remembers the last organization name, organization identifier and
GitHub username so the next run can offer them as defaults.

Stored in ~/.swiftfw/preferences.json (override the directory with the
SWIFTFW_HOME environment variable).
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Dict, Any

from filelock import FileLock

from swiftfw.core.errors import PreferencesError

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "SWIFTFW_HOME"
HOME_DIR_NAME = ".swiftfw"


def default_home() -> Path:
    """Resolve the preferences directory from the environment."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / HOME_DIR_NAME


class PreferenceStore:
    """Key-value settings persisted as JSON.

    Provides:
    - get/set of individual keys, saved immediately
    - Atomic writes guarded by a file lock
    - Tolerant loading (a corrupted file reads as empty)
    """

    PREFERENCES_FILE = "preferences.json"

    def __init__(self, home: Optional[Path] = None):
        """Initialize the store.

        Args:
            home: Directory holding preferences.json (defaults to
                $SWIFTFW_HOME or ~/.swiftfw)
        """
        self.home = Path(home) if home else default_home()
        self.path = self.home / self.PREFERENCES_FILE
        self._data: Optional[Dict[str, Any]] = None
        self._lock = FileLock(str(self.path) + ".lock", timeout=30)

    @property
    def data(self) -> Dict[str, Any]:
        if self._data is None:
            self._data = self._load()
        return self._data

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Preferences file unreadable: %s. Ignoring it.", e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Preferences file has unexpected format. Ignoring it.")
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store a value and persist the whole store."""
        self.data[key] = value
        self.save()

    def all(self) -> Dict[str, Any]:
        return dict(self.data)

    def clear(self) -> None:
        self._data = {}
        self.save()

    def save(self) -> None:
        """Write preferences to disk (atomic).

        Writes to a temp file with fsync, then replaces the target
        with os.replace() while holding the file lock.

        Raises:
            PreferencesError: If the file cannot be written
        """
        try:
            self.home.mkdir(parents=True, exist_ok=True)
            with self._lock:
                fd = None
                tmp_path = None
                try:
                    fd, tmp_path = tempfile.mkstemp(
                        dir=str(self.home),
                        suffix=".tmp",
                        prefix="preferences_",
                    )
                    with os.fdopen(fd, "w") as f:
                        fd = None  # os.fdopen takes ownership of fd
                        json.dump(self.data, f, indent=2, sort_keys=True)
                        f.flush()
                        os.fsync(f.fileno())
                    os.replace(tmp_path, str(self.path))
                    tmp_path = None
                finally:
                    if fd is not None:
                        os.close(fd)
                    if tmp_path and os.path.exists(tmp_path):
                        os.unlink(tmp_path)
        except OSError as e:
            raise PreferencesError(f"Could not save preferences to {self.path}: {e}") from e
        logger.debug("Saved preferences to %s", self.path)
