"""The chain of questions asked while composing a commit message."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional, Union

from commitwise.config import (
    QuestionConfig,
    SelectQuestionDataConfig,
    TextQuestionDataConfig,
)


@dataclass
class Option:
    value: str = ""
    desc: str = ""


@dataclass
class SelectQuestionData:
    options: list[Option] = field(default_factory=list)

    @property
    def type(self) -> str:
        return "select"


@dataclass
class TextQuestionData:
    placeholder: str = ""
    min: int = 0
    max: int = 0

    @property
    def type(self) -> str:
        return "text"


QuestionData = Union[SelectQuestionData, TextQuestionData]


class QuestionList:
    """A singly linked chain of questions; sub-questions can be spliced in."""

    def __init__(self) -> None:
        self.head: Optional[Question] = None
        self.tail: Optional[Question] = None

    def __iter__(self) -> Iterator[Question]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def __repr__(self) -> str:
        return f"QuestionList({[question.key for question in self]!r})"

    def append(self, question: Question) -> None:
        """Add question at the end of the chain."""
        question.next = None
        if self.head is None or self.tail is None:
            self.head = self.tail = question
            return
        self.tail.next = question
        self.tail = question

    def insert_list_after(self, node: Question, other: QuestionList) -> None:
        """Splice the questions of other into the chain right after node."""
        if other.head is None or other.tail is None:
            return
        other.tail.next = node.next
        node.next = other.head
        if self.tail is node:
            self.tail = other.tail

    def describe(self) -> str:
        """Return a readable, indented dump of the chain and its sub-questions."""
        if self.head is None:
            return "Empty list"
        parts = []
        for index, question in enumerate(self, start=1):
            lines = [
                f"Node #{index}\n",
                f"  Key:    {question.key}\n",
                f"  Type:   {question.type}\n",
                f"  Label:  {question.label}\n",
                f"  TpStr:  {question.template_string}\n",
                "  Data:\n",
            ]
            data = question.data
            if isinstance(data, SelectQuestionData):
                lines.append("    - Options:\n")
                lines.extend(
                    f"      {number}: {{Value:{option.value} Desc:{option.desc}}}\n"
                    for number, option in enumerate(data.options, start=1)
                )
            elif isinstance(data, TextQuestionData):
                lines.append(f"    - Placeholder: {data.placeholder}\n")
                lines.append(f"    - Min: {data.min}\n")
                lines.append(f"    - Max: {data.max}\n")
            if question.sub_questions.head is not None:
                lines.append("  Sub-Questions:\n")
                lines.append("\t")
                lines.append(question.sub_questions.describe().replace("\n", "\n\t"))
            lines.append("\n")
            parts.append("".join(lines))
        return "".join(parts)

    def all_keys(self) -> list[str]:
        """Return every key in the chain, each followed by its sub-question keys."""
        keys: list[str] = []
        for question in self:
            keys.append(question.key)
            keys.extend(question.sub_questions.all_keys())
        return keys


@dataclass(eq=False)
class Question:
    key: str = ""
    label: str = ""
    type: str = ""
    data: Optional[QuestionData] = None
    subquestion_condition: str = ""
    template_string: str = ""
    sub_questions: QuestionList = field(default_factory=QuestionList)
    next: Optional[Question] = field(default=None, repr=False)


def _convert_data(
    data: Union[SelectQuestionDataConfig, TextQuestionDataConfig, None],
) -> Optional[QuestionData]:
    if isinstance(data, SelectQuestionDataConfig):
        return SelectQuestionData(
            options=[Option(value=opt.value, desc=opt.desc) for opt in data.options]
        )
    if isinstance(data, TextQuestionDataConfig):
        return TextQuestionData(placeholder=data.placeholder, min=data.min, max=data.max)
    return None


def parse_question_list(configs: Iterable[QuestionConfig]) -> QuestionList:
    """Turn parsed question settings into a linked question chain."""
    questions = QuestionList()
    for config in configs:
        questions.append(
            Question(
                key=config.key,
                label=config.label,
                type=config.type,
                data=_convert_data(config.data),
                subquestion_condition=config.subquestion_condition,
                template_string=config.template_string,
                sub_questions=parse_question_list(config.subquestions),
            )
        )
    return questions