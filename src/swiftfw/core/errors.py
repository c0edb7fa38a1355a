"""Exceptions raised by swiftfw."""

from pathlib import Path
from typing import Optional


class SwiftfwError(Exception):
    """Base exception for swiftfw."""
    pass


class TemplateRenderError(SwiftfwError):
    """A template could not be loaded, rendered, copied or written.

    Always fatal: generation stops at the first failing file and
    already written files are left in place.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class PreferencesError(SwiftfwError):
    """The preferences store could not be written."""
    pass
