"""
Tests for render.py
"""
from langchain_core.messages import HumanMessage, SystemMessage

from pyd2ts.domain.prompts.render import PLACEHOLDERS, build_variables, render_prompt, substitute


def _vars(**overrides):
    values = build_variables(
        base_python="class A(BaseModel):\n    id: int\n",
        new_python="class A(BaseModel):\n    id: int\n    age: int\n",
        diff="+    age: int",
        current_typescript="export interface A { id: number; }",
    )
    values.update(overrides)
    return values


def test_all_placeholders_are_substituted():
    user = "{basePython}|{newPython}|{diff}|{currentTypescript}|{customPrompt}"

    prompt = render_prompt("static system", user, _vars(customPrompt="use camelCase"))

    assert prompt.system == "static system"
    for name in PLACEHOLDERS:
        assert "{" + name + "}" not in prompt.user
    assert prompt.user.endswith("|use camelCase")
    assert "+    age: int" in prompt.user


def test_repeated_placeholder_is_replaced_everywhere():
    prompt = render_prompt("{diff}", "{diff} and again {diff}", _vars(diff="D"))

    assert prompt.system == "D"
    assert prompt.user == "D and again D"


def test_custom_prompt_defaults_to_empty():
    values = _vars()
    del values["customPrompt"]

    prompt = render_prompt("", "rule: [{customPrompt}]", values)

    assert prompt.user == "rule: []"
    assert build_variables(
        base_python="", new_python="", diff="", current_typescript="", custom_prompt=None
    )["customPrompt"] == ""


def test_unknown_placeholders_and_braces_pass_through():
    template = "{unknown} {diff} { diff } {diff"

    assert substitute(template, {"diff": "X"}) == "{unknown} X { diff } {diff"


def test_substituted_values_are_not_rescanned():
    prompt = render_prompt("", "{basePython} / {diff}", _vars(basePython="literal {diff}", diff="D"))

    assert prompt.user == "literal {diff} / D"


def test_missing_variable_leaves_placeholder():
    assert substitute("{newPython}", {}) == "{newPython}"


def test_to_messages_is_system_then_human():
    messages = render_prompt("sys {diff}", "user {diff}", _vars(diff="d")).to_messages()

    assert isinstance(messages[0], SystemMessage)
    assert isinstance(messages[1], HumanMessage)
    assert [m.content for m in messages] == ["sys d", "user d"]
