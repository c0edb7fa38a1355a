"""Configuration record for a generated project.

A single ProjectConfig is filled field by field while prompting and is
read-only for every later stage (rendering, copying, emitting, post-run).
"""

import os
from dataclasses import dataclass, asdict
from datetime import date
from typing import Optional, Dict, Any

import click

DEFAULT_PROJECT_NAME = "MyProject"
DEFAULT_ORGANIZATION_NAME = "MyOrg"
DEFAULT_ORGANIZATION_ID = "org.my"


@dataclass
class ProjectConfig:
    """Answers collected for one generator run."""
    project_name: str = DEFAULT_PROJECT_NAME
    organization_name: str = DEFAULT_ORGANIZATION_NAME
    organization_id: str = DEFAULT_ORGANIZATION_ID
    cocoapods: bool = True
    github_user: Optional[str] = None  # Only asked when cocoapods is True

    @property
    def xcodeproj_name(self) -> str:
        """Name of the generated Xcode project bundle."""
        return f"{self.project_name}.xcodeproj"

    @property
    def podspec_name(self) -> str:
        return f"{self.project_name}.podspec"

    def to_dict(self) -> dict:
        return asdict(self)

    def to_context(self) -> Dict[str, Any]:
        """Build the template substitution context.

        Every field is exposed, unset ones as None, so templates
        rendered with StrictUndefined can test them.
        """
        context = self.to_dict()
        context["year"] = date.today().year
        return context


def validate_project_name(value: str) -> str:
    """Value processor for the project name prompt.

    Raises:
        click.BadParameter: If the name is blank or contains a path
            separator (click re-asks the question).
    """
    name = str(value).strip()
    if not name:
        raise click.BadParameter("Project name must not be empty")
    if "/" in name or (os.sep != "/" and os.sep in name):
        raise click.BadParameter("Project name must not contain a path separator")
    return name
