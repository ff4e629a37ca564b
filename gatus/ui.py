"""Configuration of the dashboard's appearance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

DEFAULT_TITLE = "Health Dashboard | Gatus"
DEFAULT_DESCRIPTION = (
    "Gatus is an advanced automated status page that lets you monitor your applications "
    "and configure alerts to notify you if there's an issue"
)
DEFAULT_HEADER = "Health Status"
DEFAULT_LOGO = ""
DEFAULT_LINK = ""


class ButtonValidationError(ValueError):
    """Raised when a button lacks a name or a link."""

    def __init__(self) -> None:
        super().__init__("invalid button configuration: missing required name or link")


@dataclass
class Button:
    """A link button shown below the header."""

    name: str = ""
    link: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Button:
        data = data or {}
        return cls(name=str(data.get("name") or ""), link=str(data.get("link") or ""))

    def validate(self) -> None:
        if not self.name or not self.link:
            raise ButtonValidationError()


@dataclass
class UIConfig:
    """Title, description, header, logo, link and buttons of the dashboard."""

    title: str = ""
    description: str = ""
    header: str = ""
    logo: str = ""
    link: str = ""
    buttons: list[Button] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> UIConfig:
        data = data or {}
        return cls(
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            header=str(data.get("header") or ""),
            logo=str(data.get("logo") or ""),
            link=str(data.get("link") or ""),
            buttons=[Button.from_dict(item) for item in data.get("buttons") or []],
        )

    def validate_and_set_defaults(self) -> None:
        if not self.title:
            self.title = DEFAULT_TITLE
        if not self.description:
            self.description = DEFAULT_DESCRIPTION
        if not self.header:
            self.header = DEFAULT_HEADER
        for button in self.buttons:
            button.validate()


def default_config() -> UIConfig:
    """Return a configuration holding the default texts."""
    return UIConfig(
        title=DEFAULT_TITLE,
        description=DEFAULT_DESCRIPTION,
        header=DEFAULT_HEADER,
        logo=DEFAULT_LOGO,
        link=DEFAULT_LINK,
    )