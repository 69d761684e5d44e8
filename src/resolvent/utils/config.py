import copy
import os
import re
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional


DEFAULTS: Dict[str, Any] = {
    "prover": {
        "loop": "basic",
        "max_steps": None,
    },
    "trace": {
        "path": None,
    },
}

# ${NAME} or ${NAME:fallback}, anywhere inside a string value
PLACEHOLDER = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<fallback>[^}]*))?\}")


def search_paths() -> List[Path]:
    """Places a configuration file is looked for, first match wins."""
    return [
        Path.cwd() / "configs" / "default.yaml",
        Path.home() / ".resolvent" / "config.yaml",
    ]


def _expand(value: Any) -> Any:
    if isinstance(value, str):
        return PLACEHOLDER.sub(
            lambda m: os.environ.get(m.group("name"), m.group("fallback") or ""), value
        )
    if isinstance(value, dict):
        return {k: _expand(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand(v) for v in value]
    return value


def _merge(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class Config:
    """Prover settings from YAML layered over ``DEFAULTS``.

    Only the command line and ``resolvent.prove`` read this; the engine
    itself takes explicit arguments.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or self._find_config_file()
        self.config = copy.deepcopy(DEFAULTS)
        if self.config_path is not None:
            _merge(self.config, self._load_config())
        self.config = _expand(self.config)
        self._validate()

    def _find_config_file(self) -> Optional[str]:
        for path in search_paths():
            if path.exists():
                return str(path)
        return None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        with open(self.config_path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Expected a mapping in {self.config_path}, got {type(loaded).__name__}")
        return loaded

    def _validate(self):
        prover = self.config["prover"]
        max_steps = prover.get("max_steps")
        if isinstance(max_steps, str) and max_steps.strip() in ("", "null", "None"):
            max_steps = None
        if max_steps is not None:
            try:
                max_steps = int(max_steps)
            except (TypeError, ValueError):
                raise ValueError(f"prover.max_steps must be an integer, got {max_steps!r}")
            if max_steps < 1:
                raise ValueError(f"prover.max_steps must be positive, got {max_steps}")
        prover["max_steps"] = max_steps

        trace = self.config["trace"]
        trace["path"] = trace.get("path") or None

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dot-separated key such as ``prover.loop``."""
        node = self.config
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def update(self, updates: Dict[str, Any]):
        """Deep-merge ``updates`` into the current values."""
        _merge(self.config, copy.deepcopy(updates))


_config = None


def get_config() -> Config:
    """Process-wide configuration, loaded on first use."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Optional[Config]):
    """Replace the global configuration (None forces a reload)."""
    global _config
    _config = config
