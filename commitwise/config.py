"""Locating, reading and validating the YAML settings file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

LOCAL_CONFIG = "config.yml"


class ConfigError(Exception):
    """Raised when the settings file cannot be found, read or understood."""


@dataclass
class Colors:
    primary: str = ""
    secondary: str = ""
    green: str = ""
    red: str = ""


@dataclass
class OptionConfig:
    value: str = ""
    desc: str = ""


@dataclass
class SelectQuestionDataConfig:
    options: list[OptionConfig] = field(default_factory=list)


@dataclass
class TextQuestionDataConfig:
    placeholder: str = ""
    min: int = 0
    max: int = 0


QuestionDataConfig = Union[SelectQuestionDataConfig, TextQuestionDataConfig]


@dataclass
class QuestionConfig:
    key: str = ""
    label: str = ""
    type: str = ""
    data: Optional[QuestionDataConfig] = None
    subquestion_condition: str = ""
    subquestions: list[QuestionConfig] = field(default_factory=list)
    template_string: str = ""


@dataclass
class Settings:
    questions: list[QuestionConfig] = field(default_factory=list)
    template_commit: str = ""
    colors: Colors = field(default_factory=Colors)


def _mapping(value: Any, what: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{what} must be a mapping")
    return value


def _sequence(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"{what} must be a list")
    return value


def _string(value: Any, what: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        raise ConfigError(f"{what} must be a scalar value")
    return str(value)


def _integer(value: Any, what: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{what} must be an integer")
    return value


def get_config_path() -> str:
    """Return the settings file to use: ./config.yml, else ~/.config/commitwise/config.yml."""
    if os.path.exists(LOCAL_CONFIG):
        return LOCAL_CONFIG
    try:
        home = Path.home()
    except RuntimeError as exc:
        raise ConfigError(str(exc)) from exc
    config_path = home / ".config" / "commitwise" / "config.yml"
    if config_path.exists():
        return str(config_path)
    raise ConfigError(
        f"settings file not found in either {LOCAL_CONFIG} or {config_path}"
    )


def read_setting_file(path: str | os.PathLike[str]) -> Settings:
    """Read and parse the YAML settings file at path."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(str(exc)) from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}") from exc
    return parse_settings(data)


def parse_settings(data: Any) -> Settings:
    """Build Settings from an already loaded YAML document."""
    root = _mapping(data, "settings")
    colors = _mapping(root.get("Colors"), "Colors")
    return Settings(
        questions=[
            parse_question_config(node)
            for node in _sequence(root.get("Questions"), "Questions")
        ],
        template_commit=_string(root.get("TemplateCommit"), "TemplateCommit"),
        colors=Colors(
            primary=_string(colors.get("primary"), "Colors.primary"),
            secondary=_string(colors.get("secondary"), "Colors.secondary"),
            green=_string(colors.get("green"), "Colors.green"),
            red=_string(colors.get("red"), "Colors.red"),
        ),
    )


def _parse_option(node: Any) -> OptionConfig:
    fields = _mapping(node, "option")
    return OptionConfig(
        value=_string(fields.get("value"), "option value"),
        desc=_string(fields.get("desc"), "option desc"),
    )


def parse_question_config(node: Any) -> QuestionConfig:
    """Build one QuestionConfig, including its sub-questions and typed data."""
    fields = _mapping(node, "question")
    key = _string(fields.get("key"), "key")
    question_type = _string(fields.get("type"), "type")
    subquestions = [
        parse_question_config(child)
        for child in _sequence(fields.get("subquestions"), "subquestions")
    ]

    if "data" not in fields:
        raise ConfigError(f"missing data field for question key: {key}")
    data_fields = _mapping(fields["data"], f"data of question {key}")

    data: QuestionDataConfig
    if question_type == "select":
        data = SelectQuestionDataConfig(
            options=[
                _parse_option(option)
                for option in _sequence(data_fields.get("options"), "options")
            ]
        )
    elif question_type == "text":
        data = TextQuestionDataConfig(
            placeholder=_string(data_fields.get("placeholder"), "placeholder"),
            min=_integer(data_fields.get("min"), "min"),
            max=_integer(data_fields.get("max"), "max"),
        )
    else:
        raise ConfigError(f"unknown question type: {question_type}")

    return QuestionConfig(
        key=key,
        label=_string(fields.get("label"), "label"),
        type=question_type,
        data=data,
        subquestion_condition=_string(
            fields.get("subquestion_condition"), "subquestion_condition"
        ),
        subquestions=subquestions,
        template_string=_string(fields.get("template_string"), "template_string"),
    )