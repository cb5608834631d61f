from pathlib import Path

import pytest

from commitwise.config import (
    Colors,
    ConfigError,
    OptionConfig,
    SelectQuestionDataConfig,
    Settings,
    TextQuestionDataConfig,
    get_config_path,
    parse_question_config,
    parse_settings,
    read_setting_file,
)

SAMPLE = """\
TemplateCommit: "<type>(<scope>): <subject>"
Colors:
  primary: "#ff0000"
  secondary: "#00ff00"
  green: "2"
  red: "1"
Questions:
  - key: type
    label: Select the type
    type: select
    subquestion_condition: feat
    data:
      options:
        - value: feat
          desc: A new feature
        - value: fix
    subquestions:
      - key: scope
        label: Scope
        type: text
        template_string: "(<value>)"
        data:
          placeholder: module name
          min: 1
          max: 20
  - key: subject
    label: Subject
    type: text
    data:
      max: 50
"""


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_read_setting_file_parses_everything(tmp_path):
    settings = read_setting_file(write(tmp_path, SAMPLE))
    assert settings.template_commit == "<type>(<scope>): <subject>"
    assert settings.colors == Colors(primary="#ff0000", secondary="#00ff00", green="2", red="1")
    assert [q.key for q in settings.questions] == ["type", "subject"]


def test_select_question_options(tmp_path):
    settings = read_setting_file(write(tmp_path, SAMPLE))
    first = settings.questions[0]
    assert first.type == "select"
    assert first.subquestion_condition == "feat"
    assert first.data == SelectQuestionDataConfig(
        options=[OptionConfig("feat", "A new feature"), OptionConfig("fix", "")]
    )


def test_subquestions_are_parsed(tmp_path):
    settings = read_setting_file(write(tmp_path, SAMPLE))
    sub = settings.questions[0].subquestions
    assert len(sub) == 1
    assert sub[0].key == "scope"
    assert sub[0].template_string == "(<value>)"
    assert sub[0].data == TextQuestionDataConfig(placeholder="module name", min=1, max=20)


def test_text_data_defaults(tmp_path):
    settings = read_setting_file(write(tmp_path, SAMPLE))
    assert settings.questions[1].data == TextQuestionDataConfig(placeholder="", min=0, max=50)


def test_empty_document_gives_defaults():
    assert parse_settings(None) == Settings()


def test_non_mapping_document_is_rejected():
    with pytest.raises(ConfigError):
        parse_settings(["not", "a", "mapping"])


def test_missing_data_field():
    with pytest.raises(ConfigError, match="missing data field for question key: body"):
        parse_question_config({"key": "body", "type": "text"})


def test_unknown_question_type():
    with pytest.raises(ConfigError, match="unknown question type: radio"):
        parse_question_config({"key": "k", "type": "radio", "data": {}})


def test_null_data_gives_empty_text_data():
    question = parse_question_config({"key": "k", "type": "text", "data": None})
    assert question.data == TextQuestionDataConfig()


def test_non_integer_limit_is_rejected():
    with pytest.raises(ConfigError):
        parse_question_config({"key": "k", "type": "text", "data": {"max": "lots"}})


def test_error_in_subquestion_propagates():
    node = {
        "key": "outer",
        "type": "text",
        "data": {},
        "subquestions": [{"key": "inner", "type": "text"}],
    }
    with pytest.raises(ConfigError, match="inner"):
        parse_question_config(node)


def test_read_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        read_setting_file(tmp_path / "absent.yml")


def test_read_invalid_yaml(tmp_path):
    with pytest.raises(ConfigError):
        read_setting_file(write(tmp_path, "Questions: [unclosed"))


def test_get_config_path_prefers_local(tmp_path, monkeypatch):
    write(tmp_path, SAMPLE)
    monkeypatch.chdir(tmp_path)
    assert get_config_path() == "config.yml"


def test_get_config_path_falls_back_to_home(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    home = tmp_path / "home"
    target = home / ".config" / "commitwise" / "config.yml"
    target.parent.mkdir(parents=True)
    target.write_text(SAMPLE, encoding="utf-8")
    monkeypatch.chdir(work)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    assert get_config_path() == str(target)


def test_get_config_path_not_found(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))
    with pytest.raises(ConfigError, match="settings file not found"):
        get_config_path()