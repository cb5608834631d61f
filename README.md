# commitwise

An interactive command-line tool that helps you write clean, consistent and
standardized Git commit messages. It walks you through a series of questions
in the terminal (commit type, scope, summary, body and so on) and fills your
answers into a commit template such as Conventional Commits, Gitmoji or one
of your own.

## Installation

```
pip install .
```

## Usage

Stage your changes, then run:

```
commitwise
```

The prompts need an interactive terminal; when standard input or output is
not a terminal, `commitwise` reports an error and exits with status 1.

Answer each question:

- In a list, move with the arrow keys (or `k` / `j`; the list wraps around)
  and press Enter to pick the highlighted option. Long lists are shown as a
  seven-line window around the cursor.
- In a text field, type your answer and press Enter. Left/Right, Home/End,
  Backspace, Delete, `ctrl+a`, `ctrl+e`, `ctrl+u` and `ctrl+k` edit the line.
  A counter shows the length in green while it is within the question's
  `min` / `max` limits and in red otherwise; Enter is ignored until it is
  within them, and typing stops at `max` characters.
- Press `ctrl+c` at any time to quit; nothing is committed and the command
  exits with status 1.

When every question has been answered, the message is built from the
template, written to a temporary file and handed to `git commit --edit -F`,
so you get one last look in your editor before the commit is recorded. If
git fails, `commitwise` prints the error and exits with status 1.

To use a specific settings file:

```
commitwise --config path/to/config.yml
```

Without `--config`, the settings file is looked up as `config.yml` in the
current directory first, then as `~/.config/commitwise/config.yml`.

`commitwise --version` prints the version.

## Settings file

The settings file is YAML with three sections: `Questions`, `TemplateCommit`
and `Colors`.

```yaml
Colors:
  primary: "5"
  secondary: "6"
  green: "2"
  red: "1"

TemplateCommit: "<type><scope>: <subject>\n\n<body>"

Questions:
  - key: type
    label: Select the type of change
    type: select
    data:
      options:
        - value: feat
          desc: A new feature
        - value: fix
          desc: A bug fix
        - value: docs
          desc: Documentation only changes
  - key: scope
    label: Scope of the change (optional)
    type: text
    template_string: "(<value>)"
    data:
      placeholder: e.g. parser
  - key: subject
    label: Short description
    type: text
    data:
      min: 1
      max: 72
  - key: has_body
    label: Add a longer description?
    type: select
    subquestion_condition: "yes"
    subquestions:
      - key: body
        label: Longer description
        type: text
        data: {}
    data:
      options:
        - value: "yes"
        - value: "no"
```

Each question has:

- `key`: the name used as `<key>` in `TemplateCommit`.
- `label`: the text shown when asking.
- `type`: `select` (choose from `options`, each with a `value` and an
  optional `desc`) or `text` (free input with optional `placeholder`, `min`
  and `max` lengths; a `max` of 0 means no upper limit).
- `data`: required, even if empty; the options or text settings above.
- `template_string`: optional; when the answer is not empty it is replaced
  by this string, with `<value>` replaced by the answer.
- `subquestion_condition` and `subquestions`: optional; when the answer
  equals the condition, the sub-questions are asked next.

A missing `data` field or a `type` other than `select` or `text` is reported
as an error when the file is read.

Placeholders for questions that were never asked (including sub-questions
that were skipped) are replaced with an empty string, and runs of three or
more newlines in the final message are collapsed to a single blank line.

Colors are terminal color numbers (0–255) or `#rrggbb` / `#rgb` values:
`primary` highlights the selected option and your answers, `secondary`
colors the question marker, and `green` / `red` show whether a text answer's
length is within its limits.

## Using it from Python

The pieces behind the command can be used on their own:

```python
from commitwise.config import read_setting_file
from commitwise.questions import parse_question_list
from commitwise.git import build_commit_message

settings = read_setting_file("config.yml")
questions = parse_question_list(settings.questions)
message = build_commit_message(
    settings.template_commit,
    {"type": "feat", "scope": "parser", "subject": "add lists"},
    questions,
)
```

- `commitwise.config`: `get_config_path()`, `read_setting_file(path)`,
  `parse_settings(data)` and the `Settings` / `QuestionConfig` dataclasses;
  problems raise `ConfigError`.
- `commitwise.questions`: `parse_question_list(configs)` returns a
  `QuestionList`, which iterates over its `Question` objects and offers
  `all_keys()` and `describe()`.
- `commitwise.git`: `build_commit_message(template, answers, questions)` and
  `commit(message)`, which raises `subprocess.CalledProcessError` when git
  fails.
- `commitwise.prompts`: `PromptModel`, driven by key names through
  `handle_key(key)` and rendered by `view()`, and `run_prompts(questions,
  colors)`, which runs it in the terminal.

## What it does not do

`commitwise` does not stage files or push; it only composes the message and
runs `git commit`. It needs `git` on the `PATH` and an interactive terminal.