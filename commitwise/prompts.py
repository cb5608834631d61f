"""Interactive terminal prompts that collect the answers for a commit message."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

import blessed

from commitwise.config import Colors
from commitwise.questions import (
    Question,
    QuestionData,
    QuestionList,
    SelectQuestionData,
    TextQuestionData,
)
from commitwise.utils import arithmetic_mod, pad_end, wrap_text

DEFAULT_PLACEHOLDER = "Write your answers here"
_WINDOW_SIZE = 7
_INPUT_WIDTH = 100


def _colour_code(colour: str) -> str:
    colour = colour.strip()
    if colour.isdigit():
        number = int(colour)
        if number < 8:
            return str(30 + number)
        if number < 16:
            return str(90 + number - 8)
        if number < 256:
            return f"38;5;{number}"
        return ""
    if colour.startswith("#"):
        digits = colour[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6:
            try:
                red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
            except ValueError:
                return ""
            return f"38;2;{red};{green};{blue}"
    return ""


@dataclass(frozen=True)
class Style:
    """Foreground colour and text attributes applied with ANSI escape codes."""

    foreground: str = ""
    bold: bool = False
    reverse: bool = False

    def render(self, text: str) -> str:
        """Return text wrapped in the escape codes of this style."""
        codes = []
        if self.bold:
            codes.append("1")
        if self.reverse:
            codes.append("7")
        colour = _colour_code(self.foreground)
        if colour:
            codes.append(colour)
        if not codes or not text:
            return text
        return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


_CURSOR_STYLE = Style(reverse=True)
_PLACEHOLDER_STYLE = Style(foreground="240")


def slide_window_options(length: int, window_size: int, current_index: int) -> list[int]:
    """Return the option indexes visible in a window centred on current_index."""
    if length > window_size:
        offset = window_size // 2
        return [
            arithmetic_mod(current_index + position - offset, length)
            for position in range(window_size)
        ]
    return list(range(length))


def is_valid_input_length(minimum: int, maximum: int, text: str) -> bool:
    """Check text against a minimum length and an optional (positive) maximum."""
    fits_max = maximum <= 0 or len(text) <= maximum
    return fits_max and len(text) >= minimum


class TextInput:
    """A single-line editable text field."""

    def __init__(
        self, placeholder: str = "", char_limit: int = 0, width: int = _INPUT_WIDTH
    ) -> None:
        self.placeholder = placeholder or DEFAULT_PLACEHOLDER
        self.char_limit = char_limit
        self.width = width
        self.value = ""
        self.position = 0

    def _insert(self, text: str) -> None:
        if self.char_limit > 0:
            room = self.char_limit - len(self.value)
            if room <= 0:
                return
            text = text[:room]
        self.value = self.value[: self.position] + text + self.value[self.position :]
        self.position += len(text)

    def handle_key(self, key: str) -> None:
        """Apply one key press to the field."""
        if key == "backspace":
            if self.position > 0:
                self.value = self.value[: self.position - 1] + self.value[self.position :]
                self.position -= 1
        elif key == "delete":
            self.value = self.value[: self.position] + self.value[self.position + 1 :]
        elif key == "left":
            self.position = max(0, self.position - 1)
        elif key == "right":
            self.position = min(len(self.value), self.position + 1)
        elif key in ("home", "ctrl+a"):
            self.position = 0
        elif key in ("end", "ctrl+e"):
            self.position = len(self.value)
        elif key == "ctrl+u":
            self.value = self.value[self.position :]
            self.position = 0
        elif key == "ctrl+k":
            self.value = self.value[: self.position]
        elif len(key) == 1 and key.isprintable():
            self._insert(key)

    def view(self) -> str:
        """Render the field with its cursor, or the placeholder when empty."""
        if not self.value:
            head = self.placeholder[:1] or " "
            return _CURSOR_STYLE.render(head) + _PLACEHOLDER_STYLE.render(
                self.placeholder[1:]
            )
        start = max(0, self.position - self.width + 1) if self.width > 0 else 0
        visible = self.value[start : start + self.width] if self.width > 0 else self.value
        cursor = self.position - start
        at_cursor = visible[cursor : cursor + 1] or " "
        return visible[:cursor] + _CURSOR_STYLE.render(at_cursor) + visible[cursor + 1 :]


def _new_text_input(data: Optional[QuestionData]) -> TextInput:
    if isinstance(data, TextQuestionData):
        return TextInput(placeholder=data.placeholder, char_limit=data.max)
    return TextInput()


class PromptModel:
    """State of the question-and-answer session, driven by key presses."""

    def __init__(self, questions: QuestionList, colors: Optional[Colors] = None) -> None:
        if questions.head is None:
            raise ValueError("there are no questions to ask")
        self.questions = questions
        self.colors = colors if colors is not None else Colors()
        self.answers: dict[str, str] = {}
        self.current: Question = questions.head
        self.error: Optional[Exception] = None
        self.shown_answered = ""
        self.cursor = 0
        self.width = 1
        self.quitting = False
        self.text_input = _new_text_input(self.current.data)
        self._question_mark_style = Style(foreground=self.colors.secondary)
        self._label_style = Style(bold=True)
        self._value_style = Style(foreground=self.colors.primary)
        self._highlight_style = Style(foreground=self.colors.primary)

    @property
    def finished(self) -> bool:
        """True once every question is answered or the session was aborted."""
        return self.quitting

    def handle_key(self, key: str) -> bool:
        """Apply one key press; return True when the session is over."""
        if self.quitting:
            return True
        if key == "ctrl+c":
            self.error = RuntimeError("program closed")
            self.quitting = True

        if self.current.type == "select":
            self._select_key(key)
        elif self.current.type == "text":
            self._text_key(key)

        if self.quitting:
            return True
        if self.current.type == "text":
            self.text_input.handle_key(key)
        return False

    def resize(self, width: int) -> None:
        """Set the terminal width the view wraps to."""
        self.width = max(1, width)

    def _select_key(self, key: str) -> None:
        data = self.current.data
        if not isinstance(data, SelectQuestionData) or not data.options:
            return
        count = len(data.options)
        if key in ("up", "k"):
            self.cursor = self.cursor - 1 if self.cursor > 0 else count - 1
        elif key in ("down", "j"):
            self.cursor = self.cursor + 1 if self.cursor < count - 1 else 0
        elif key == "enter":
            self._next_prompt(data.options[self.cursor].value)

    def _text_key(self, key: str) -> None:
        data = self.current.data
        if not isinstance(data, TextQuestionData):
            return
        if key == "enter" and is_valid_input_length(
            data.min, data.max, self.text_input.value
        ):
            self._next_prompt(self.text_input.value)

    def _next_prompt(self, value: str) -> None:
        question = self.current
        self.answers[question.key] = value
        self.shown_answered += self._format_answered(question.label, value)

        if question.subquestion_condition and question.subquestion_condition == value:
            self.questions.insert_list_after(question, question.sub_questions)

        if question.next is None:
            self.quitting = True
            return
        self.current = question.next
        if isinstance(self.current.data, TextQuestionData):
            self.text_input = _new_text_input(self.current.data)
        elif isinstance(self.current.data, SelectQuestionData):
            self.cursor = 0

    def _format_answered(self, label: str, value: str) -> str:
        return (
            self._question_mark_style.render("? ")
            + self._label_style.render(f"{label}: ")
            + self._value_style.render(value)
            + "\n"
        )

    def _render_select(self, data: SelectQuestionData) -> str:
        options = data.options
        longest = max((len(option.value) for option in options), default=0)
        lines = []
        for index in slide_window_options(len(options), _WINDOW_SIZE, self.cursor):
            option = options[index]
            name = f"{option.value}: " if option.desc else option.value
            selected = index == self.cursor
            line = ("❯ " if selected else "  ") + pad_end(name, longest + 2, " ") + option.desc
            lines.append(self._highlight_style.render(line) if selected else line)
            lines.append("\n")
        return "".join(lines)

    def _render_text(self, data: TextQuestionData) -> str:
        value = self.text_input.value
        valid = is_valid_input_length(data.min, data.max, value)
        style = Style(foreground=self.colors.green if valid else self.colors.red)
        counter = f"({len(value)}/{data.max})" if data.max > 0 else f"({len(value)})"
        return self.text_input.view() + "\n" + style.render(counter)

    def view(self) -> str:
        """Render the answered questions and the current prompt."""
        if self.quitting:
            return self.shown_answered + "\n" if self.shown_answered else ""

        parts = [
            self.shown_answered,
            self._question_mark_style.render("? "),
            self._label_style.render(self.current.label),
            "\n",
        ]
        data = self.current.data
        if isinstance(data, SelectQuestionData):
            parts.append(self._render_select(data))
        elif isinstance(data, TextQuestionData):
            parts.append(self._render_text(data))
            parts.append("\n")
        parts.append("\nPress ctrl+c to quit.\n")
        return wrap_text("".join(parts), self.width)


_SEQUENCE_NAMES = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_ENTER": "enter",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "delete",
    "KEY_HOME": "home",
    "KEY_END": "end",
    "KEY_TAB": "tab",
    "KEY_ESCAPE": "esc",
}

_CONTROL_NAMES = {
    "\x03": "ctrl+c",
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x01": "ctrl+a",
    "\x05": "ctrl+e",
    "\x15": "ctrl+u",
    "\x0b": "ctrl+k",
    "\t": "tab",
    "\x1b": "esc",
}


def _key_name(keystroke: blessed.keyboard.Keystroke) -> str:
    if keystroke.is_sequence:
        name = _SEQUENCE_NAMES.get(keystroke.name or "")
        if name:
            return name
    text = str(keystroke)
    if text in _CONTROL_NAMES:
        return _CONTROL_NAMES[text]
    if len(text) == 1 and text.isprintable():
        return text
    return ""


def _draw(terminal: blessed.Terminal, previous_lines: int, frame: str) -> int:
    output = terminal.move_up(previous_lines) if previous_lines else ""
    output += "\r" + terminal.clear_eos + frame.replace("\n", "\r\n")
    sys.stdout.write(output)
    sys.stdout.flush()
    return frame.count("\n")


def run_prompts(questions: QuestionList, colors: Colors) -> PromptModel:
    """Ask every question interactively and return the finished model."""
    model = PromptModel(questions, colors)
    terminal = blessed.Terminal()
    if not (terminal.is_a_tty and sys.stdin.isatty()):
        raise OSError("an interactive terminal is required")

    width = terminal.width
    model.resize(width)
    with terminal.raw():
        lines = _draw(terminal, 0, model.view())
        while not model.finished:
            keystroke = terminal.inkey(timeout=0.25)
            redraw = False
            if terminal.width != width:
                width = terminal.width
                model.resize(width)
                redraw = True
            if keystroke:
                name = _key_name(keystroke)
                if name:
                    model.handle_key(name)
                    redraw = True
            if redraw:
                lines = _draw(terminal, lines, model.view())
        _draw(terminal, lines, model.view())
    return model