from __future__ import annotations

import re

FENCE = "```"

# ```typescript 블록을 ```ts 블록보다 우선한다
_TYPESCRIPT_BLOCK_RES = (
    re.compile(r"```typescript\s*(.*?)\s*```", flags=re.DOTALL),
    re.compile(r"```ts\s*(.*?)\s*```", flags=re.DOTALL),
)


def extract_typescript_code(response: str) -> str:
    """
    Pull the TypeScript payload out of a free-form model response.

    1. first ```typescript block, else first ```ts block (interior, trimmed)
    2. otherwise drop everything up to and including the first fence and
       everything from the last remaining fence onward
    3. no fences at all: the whole response, trimmed

    Best-effort and total: never raises.
    """
    for pattern in _TYPESCRIPT_BLOCK_RES:
        m = pattern.search(response)
        if m and m.group(1):
            return m.group(1).strip()

    text = response
    first = text.find(FENCE)
    if first != -1:
        text = text[first + len(FENCE):]
    last = text.rfind(FENCE)
    if last != -1:
        text = text[:last]
    return text.strip()
