"""Interactive questions for swiftfw new.

The questions are a fixed, ordered decision table. A question may carry a
``when`` predicate that is evaluated against the answers collected so
far; questions whose predicate is false are skipped and leave their
field unset.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import click

from swiftfw.core.errors import PreferencesError
from swiftfw.core.project import (
    DEFAULT_ORGANIZATION_ID,
    DEFAULT_ORGANIZATION_NAME,
    DEFAULT_PROJECT_NAME,
    ProjectConfig,
    validate_project_name,
)

logger = logging.getLogger(__name__)

TEXT = "text"
CONFIRM = "confirm"


@dataclass(frozen=True)
class Question:
    """One row of the prompt table."""
    key: str  # ProjectConfig field and preferences key
    message: str
    kind: str = TEXT  # text or confirm
    default: Any = None
    persist: bool = False
    when: Optional[Callable[[ProjectConfig], bool]] = None
    value_proc: Optional[Callable[[str], Any]] = None
    optional: bool = False  # Blank answer leaves the field unset

    def applies(self, config: ProjectConfig) -> bool:
        return self.when is None or bool(self.when(config))


def wants_cocoapods(config: ProjectConfig) -> bool:
    return config.cocoapods


QUESTIONS: List[Question] = [
    Question(
        key="project_name",
        message="Project Name",
        default=DEFAULT_PROJECT_NAME,
        value_proc=validate_project_name,
    ),
    Question(
        key="organization_name",
        message="Organization Name",
        default=DEFAULT_ORGANIZATION_NAME,
        persist=True,
    ),
    Question(
        key="organization_id",
        message="Organization Identifier",
        default=DEFAULT_ORGANIZATION_ID,
        persist=True,
    ),
    Question(
        key="cocoapods",
        message="Would you like to distribute via CocoaPods?",
        kind=CONFIRM,
        default=True,
    ),
    Question(
        key="github_user",
        message="Would you mind telling me your username on GitHub?",
        persist=True,
        when=wants_cocoapods,
        optional=True,
    ),
]


class PromptCollector:
    """Runs the question table and fills a ProjectConfig.

    The preferences store is injected; anything with ``get(key, default)``
    and ``set(key, value)`` works. Prompt functions default to click's and
    can be swapped for testing.
    """

    def __init__(
        self,
        preferences,
        questions: Optional[List[Question]] = None,
        prompt: Callable[..., Any] = click.prompt,
        confirm: Callable[..., bool] = click.confirm,
    ):
        self.preferences = preferences
        self.questions = questions if questions is not None else QUESTIONS
        self._prompt = prompt
        self._confirm = confirm
        self.asked: List[str] = []

    def default_for(self, question: Question) -> Any:
        """Stored answer for persisted questions, else the table default."""
        if question.persist:
            stored = self.preferences.get(question.key)
            if stored is not None:
                return stored
        return question.default

    def ask(self, question: Question) -> Any:
        """Ask a single question.

        Raises:
            click.Abort: If the user cancels (Ctrl-C or end of input)
        """
        default = self.default_for(question)
        self.asked.append(question.key)

        if question.kind == CONFIRM:
            return self._confirm(question.message, default=bool(default))

        kwargs = {"default": default}
        if question.optional and default is None:
            kwargs["default"] = ""
            kwargs["show_default"] = False
        if question.value_proc is not None:
            kwargs["value_proc"] = question.value_proc
        answer = self._prompt(question.message, **kwargs)
        if question.optional and not str(answer).strip():
            return None
        return answer

    def collect(self, config: Optional[ProjectConfig] = None) -> ProjectConfig:
        """Ask every applicable question in order.

        Returns:
            The filled configuration record
        """
        config = config or ProjectConfig()

        for question in self.questions:
            if not question.applies(config):
                logger.debug("Skipping question %s", question.key)
                setattr(config, question.key, None)
                continue

            answer = self.ask(question)
            setattr(config, question.key, answer)

            if question.persist and answer is not None:
                self._remember(question.key, answer)

        return config

    def _remember(self, key: str, value: Any) -> None:
        try:
            self.preferences.set(key, value)
        except PreferencesError as e:
            logger.warning("%s", e)
