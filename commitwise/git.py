"""Composing the commit message and handing it to git."""

from __future__ import annotations

import os
import subprocess
import tempfile
from collections.abc import Mapping

from commitwise.questions import QuestionList
from commitwise.utils import normalize_newlines


def build_commit_message(
    template: str, answers: Mapping[str, str], questions: QuestionList
) -> str:
    """Fill the <key> placeholders of template with the (templated) answers."""
    values = dict(answers)
    for key in questions.all_keys():
        values.setdefault(key, "")

    for question in questions:
        value = values.get(question.key, "")
        if question.template_string and value:
            values[question.key] = question.template_string.replace("<value>", value)

    message = template
    for key, value in values.items():
        message = message.replace(f"<{key}>", value)

    return normalize_newlines(message)


def commit(message: str) -> None:
    """Run git commit with message prefilled in the editor.

    Raises subprocess.CalledProcessError when git exits with an error.
    """
    fd, path = tempfile.mkstemp(prefix="commitwise_commitmsg_tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(message.encode("utf-8"))
        subprocess.run(["git", "commit", "--edit", "-F", path], check=True)
    finally:
        os.remove(path)