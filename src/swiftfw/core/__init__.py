"""Core modules for swiftfw.

This package contains the configuration record, the persisted
preferences store, the interactive prompt collector and the
post-generation runner.
"""

from swiftfw.core.errors import (
    SwiftfwError,
    TemplateRenderError,
    PreferencesError,
)
from swiftfw.core.project import ProjectConfig
from swiftfw.core.preferences import PreferenceStore
from swiftfw.core.prompts import PromptCollector, Question, QUESTIONS

__all__ = [
    "SwiftfwError",
    "TemplateRenderError",
    "PreferencesError",
    "ProjectConfig",
    "PreferenceStore",
    "PromptCollector",
    "Question",
    "QUESTIONS",
]
