"""Configuration loading for hdrdoc (.hdrdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".hdrdoc.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class HdrDocConfig:
    """Settings for one documentation run, rooted at the project directory."""

    root: Path
    project: str
    source_dir: Path
    overview: Path
    header_extension: str = ".hh"
    implementation_marker: str = "_impl"
    page_extension: str = "html"
    encoding: str = "utf-8"
    language: str = "en"
    resolve_markers: bool = False
    exclude_paths: List[str] = field(default_factory=list)

    def with_overrides(self, **changes: Any) -> "HdrDocConfig":
        """Return a copy with the non-``None`` values of ``changes`` applied."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})


def load_config(root: Path, config_path: Path | None = None) -> HdrDocConfig:
    """Load configuration for the project at ``root``.

    ``config_path`` defaults to ``<root>/.hdrdoc.yml``; a missing file yields
    the defaults.
    """
    root = root.expanduser().resolve()
    config_file = (config_path or root / CONFIG_FILENAME).expanduser()

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)

    project = _as_str(data.get("project")) or root.name
    source_dir_str = _as_str(data.get("source_dir")) or f"include/{project}"
    overview_str = _as_str(data.get("overview")) or "README.md"

    header_extension = _as_str(data.get("header_extension")) or ".hh"
    if not header_extension.startswith("."):
        header_extension = f".{header_extension}"

    implementation_marker = _as_str(data.get("implementation_marker"))
    if implementation_marker is None:
        implementation_marker = "_impl"

    page_extension = (_as_str(data.get("page_extension")) or "html").lstrip(".")
    encoding = _as_str(data.get("encoding")) or "utf-8"
    _check_encoding(encoding)

    resolve_markers = _as_bool(data.get("resolve_markers"))

    return HdrDocConfig(
        root=root,
        project=project,
        source_dir=root / source_dir_str,
        overview=root / overview_str,
        header_extension=header_extension,
        implementation_marker=implementation_marker,
        page_extension=page_extension,
        encoding=encoding,
        language=_as_str(data.get("language")) or "en",
        resolve_markers=bool(resolve_markers),
        exclude_paths=_as_str_list(data.get("exclude_paths")),
    )


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _check_encoding(encoding: str) -> None:
    try:
        "".encode(encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown output encoding: {encoding}") from exc


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "HdrDocConfig", "load_config"]
