"""Configuration loader for the terminal presenter."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import yaml  # type: ignore
except ModuleNotFoundError as exc:  # pragma: no cover - import guard
    raise RuntimeError(
        "PyYAML is required. Please install it with `pip install pyyaml`."
    ) from exc

DEFAULT_CONFIG_NAME = "config.yaml"
DEFAULT_THEME = "catppuccin-mocha"
DEFAULT_LOG_FILE = "logs/term_slides.log"


@dataclass
class AppConfig:
    """Wrapper around raw configuration with resolved paths."""

    raw: Dict[str, Any]
    config_path: Optional[Path]
    project_root: Path
    log_file: Path

    @property
    def logging_level(self) -> str:
        level = (
            self.raw.get("logging", {}).get("level")
            or self.raw.get("logging", {}).get("LEVEL")
            or "INFO"
        )
        return str(level).upper()

    @property
    def theme_name(self) -> str:
        theme = self.raw.get("presentation", {}).get("theme")
        return str(theme).strip() if theme else DEFAULT_THEME

    @property
    def show_footer(self) -> bool:
        value = self.raw.get("presentation", {}).get("show_footer", True)
        if isinstance(value, str):
            return value.strip().lower() not in {"0", "false", "no", "off"}
        return bool(value)

    def to_debug_dict(self) -> Dict[str, Any]:
        return {
            "config_path": str(self.config_path) if self.config_path else None,
            "log_file": str(self.log_file),
            "logging_level": self.logging_level,
            "theme": self.theme_name,
            "show_footer": self.show_footer,
        }

    def dumps(self) -> str:
        """Return a JSON string for diagnostics."""
        return json.dumps(self.to_debug_dict(), ensure_ascii=False, indent=2)


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    with config_path.open("r", encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse YAML ({exc})") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")
    for section in ("presentation", "logging"):
        if raw.get(section) is None:
            raw[section] = {}
        elif not isinstance(raw[section], dict):
            raise ValueError(f"Config section '{section}' must be a mapping: {config_path}")
    return raw


def load_config(path: Path | str | None = None, project_root: Path | None = None) -> AppConfig:
    """Load YAML config and resolve the log file path.

    An explicit ``path`` must exist. Without one, ``config.yaml`` in the
    working directory is used when present and built-in defaults otherwise.
    """
    config_path: Optional[Path]
    if path is not None:
        config_path = Path(path).expanduser().resolve()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        candidate = (Path.cwd() / DEFAULT_CONFIG_NAME).resolve()
        config_path = candidate if candidate.exists() else None

    if config_path is not None:
        raw = _read_yaml(config_path)
        root = project_root.resolve() if project_root else config_path.parent
    else:
        raw = {"presentation": {}, "logging": {}}
        root = project_root.resolve() if project_root else Path.cwd().resolve()

    log_file_name = raw.get("logging", {}).get("file", DEFAULT_LOG_FILE)
    log_file = (root / Path(str(log_file_name)).expanduser()).resolve()

    return AppConfig(
        raw=raw,
        config_path=config_path,
        project_root=root,
        log_file=log_file,
    )
