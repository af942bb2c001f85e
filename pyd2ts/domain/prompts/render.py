from __future__ import annotations

import re
from typing import Mapping, Optional

from pyd2ts.domain.schemas.conversion import RenderedPrompt

PLACEHOLDERS = ("basePython", "newPython", "diff", "currentTypescript", "customPrompt")

_PLACEHOLDER_RE = re.compile(r"\{(" + "|".join(PLACEHOLDERS) + r")\}")


def substitute(template: str, values: Mapping[str, str]) -> str:
    """
    {name} -> values[name], 한 번의 패스로 치환한다.
    치환된 값 안의 {diff} 같은 문자열은 다시 치환되지 않는다.
    모르는 placeholder나 짝이 맞지 않는 중괄호는 그대로 둔다.
    """
    def _replace(m: re.Match[str]) -> str:
        name = m.group(1)
        if name not in values:
            return m.group(0)
        return str(values[name])

    return _PLACEHOLDER_RE.sub(_replace, template)


def build_variables(
    *,
    base_python: str,
    new_python: str,
    diff: str,
    current_typescript: str,
    custom_prompt: Optional[str] = None,
) -> dict[str, str]:
    return {
        "basePython": base_python,
        "newPython": new_python,
        "diff": diff,
        "currentTypescript": current_typescript,
        "customPrompt": custom_prompt or "",
    }


def render_prompt(
    system_template: str,
    user_template: str,
    variables: Mapping[str, str],
) -> RenderedPrompt:
    values = dict(variables)
    values.setdefault("customPrompt", "")
    return RenderedPrompt(
        system=substitute(system_template, values),
        user=substitute(user_template, values),
    )
