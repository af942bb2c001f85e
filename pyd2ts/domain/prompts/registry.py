from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable

import json

import yaml

from pyd2ts.exceptions import ConfigurationError, PromptTemplateNotFound

BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

SYSTEM_TEMPLATE = "system"
USER_TEMPLATE = "user"


@dataclass(frozen=True)
class PromptTemplates:
    system: str
    user: str
    system_path: str
    user_path: str


class PromptTemplateStore:
    """
    search_dirs 순서대로 찾고, 파일이 처음 발견된 디렉터리를 사용한다.

    <dir>/
      manifest.yaml (or .yml / .json, optional)
      system.txt
      user.txt

    manifest가 있으면 templates.system / templates.user 로 파일명을 바꿀 수 있다.
    """

    def __init__(self, search_dirs: Iterable[Path]):
        self.search_dirs = tuple(Path(d) for d in search_dirs)

    @classmethod
    def default(cls, prompts_dir: Path | None = None) -> "PromptTemplateStore":
        return cls(default_search_dirs(prompts_dir))

    def get(self) -> PromptTemplates:
        return self._load_cached(tuple(str(d) for d in self.search_dirs))

    @staticmethod
    @lru_cache(maxsize=16)
    def _load_cached(dirs: tuple[str, ...]) -> PromptTemplates:
        search_dirs = [Path(d) for d in dirs]
        system_path = _find_template(search_dirs, SYSTEM_TEMPLATE)
        user_path = _find_template(search_dirs, USER_TEMPLATE)
        return PromptTemplates(
            system=system_path.read_text(encoding="utf-8").strip(),
            user=user_path.read_text(encoding="utf-8").strip(),
            system_path=str(system_path),
            user_path=str(user_path),
        )


def default_search_dirs(prompts_dir: Path | None = None) -> list[Path]:
    dirs: list[Path] = []
    if prompts_dir is not None:
        dirs.append(Path(prompts_dir))
    dirs.append(Path.cwd() / "prompts")
    dirs.append(BUNDLED_TEMPLATES_DIR)
    return dirs


def _find_template(search_dirs: list[Path], key: str) -> Path:
    searched: list[str] = []
    for d in search_dirs:
        manifest = _load_manifest(d) if d.is_dir() else {}
        templates = manifest.get("templates") or {}
        if not isinstance(templates, dict):
            raise ConfigurationError(f"Invalid manifest format: templates must be a mapping in {d}")
        filename = templates.get(key, f"{key}.txt")
        if not isinstance(filename, str):
            raise ConfigurationError(f"Invalid manifest format: templates.{key} must be a file name in {d}")
        path = d / filename
        searched.append(str(path))
        if path.is_file():
            return path
    raise PromptTemplateNotFound(f"{key}.txt", searched)


def _load_manifest(prompts_dir: Path) -> dict[str, Any]:
    """
    - manifest.yaml이 있으면 YAML 우선
    - 없으면 manifest.json 사용
    """
    yaml_path = prompts_dir / "manifest.yaml"
    yml_path = prompts_dir / "manifest.yml"
    json_path = prompts_dir / "manifest.json"

    if yaml_path.exists() or yml_path.exists():
        path = yaml_path if yaml_path.exists() else yml_path
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ConfigurationError(f"Invalid manifest format: {path}")
        return data

    if json_path.exists():
        data = json.loads(json_path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ConfigurationError(f"Invalid manifest format: {json_path}")
        return data

    return {}
