"""YAML config loading for snippetkit.

Files are read in order and merged section by section, then `${ENV_VAR}`
placeholders are expanded. A value that is exactly one placeholder takes the
YAML type of the variable's content, so `circle_decimals: ${DECIMALS}` with
`DECIMALS=4` yields the integer 4. Placeholders embedded in longer strings
are substituted as text.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Mapping, Sequence

import yaml
from dotenv import load_dotenv

from snippetkit.config.errors import ConfigError


_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")
_SCALAR_TYPES = (bool, int, float, type(None))


def _read_fragment(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise ConfigError("Config file not found", path=str(path))
    try:
        fragment = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read YAML config: {e}", path=str(path)) from e

    # An empty file parses to None.
    if fragment is None:
        return {}
    if not isinstance(fragment, Mapping):
        raise ConfigError("Top-level YAML must be a mapping/dict", path=str(path))
    return fragment


def _merged(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Return `base` updated by `overlay`; sections merge, everything else is replaced."""

    out = dict(base)
    for key, value in overlay.items():
        current = out.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            out[key] = _merged(current, value)
        else:
            out[key] = value
    return out


def _typed(text: str) -> Any:
    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError:
        return text
    return value if isinstance(value, _SCALAR_TYPES) else text


class _EnvExpander:
    """Expands placeholders and records every unresolved one."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.problems: list[str] = []

    def _lookup(self, name: str, key_path: str) -> str | None:
        value = os.getenv(name)
        if value is None or value == "":
            reason = "missing" if value is None else "empty"
            self.problems.append(f"- {name} ({reason}) at {key_path or '<root>'} in {self.source}")
            return None
        return value

    def expand(self, obj: Any, key_path: str = "") -> Any:
        if isinstance(obj, Mapping):
            return {
                str(k): self.expand(v, f"{key_path}.{k}" if key_path else str(k))
                for k, v in obj.items()
            }
        if isinstance(obj, list):
            return [self.expand(v, f"{key_path}[{i}]") for i, v in enumerate(obj)]
        if not isinstance(obj, str):
            return obj

        whole = _PLACEHOLDER_RE.fullmatch(obj)
        if whole is not None:
            value = self._lookup(whole.group(1), key_path)
            return obj if value is None else _typed(value)

        def repl(match: re.Match[str]) -> str:
            value = self._lookup(match.group(1), key_path)
            return match.group(0) if value is None else value

        return _PLACEHOLDER_RE.sub(repl, obj)


def load_config(
    paths: str | Path | Sequence[str | Path],
    *,
    load_dotenv_file: bool = True,
    dotenv_path: Path | None = None,
) -> dict[str, Any]:
    """Load and merge YAML config files, then expand `${ENV_VAR}` placeholders.

    Args:
        paths: One YAML file or several; later files override earlier ones.
        load_dotenv_file: Whether to load a .env file first. Variables already
            set in the environment win over the file.
        dotenv_path: Explicit .env path; defaults to `.env` in the working
            directory.

    Raises:
        ConfigError: If a file is missing or not a YAML mapping, or if any
            placeholder refers to a missing or empty variable.
    """

    files = [Path(paths)] if isinstance(paths, (str, Path)) else [Path(p) for p in paths]
    if not files:
        raise ConfigError("No config files provided")

    if load_dotenv_file:
        load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)

    merged: dict[str, Any] = {}
    for path in files:
        merged = _merged(merged, _read_fragment(path))

    expander = _EnvExpander(",".join(str(p) for p in files))
    expanded = expander.expand(merged)
    if expander.problems:
        raise ConfigError("\n".join(["Unresolved environment variables in config:", *expander.problems]))
    return expanded


def resolve_profile_configs(*, profile: str, configs_dir: Path) -> list[Path]:
    """Config files for a profile: `app` is app.yaml alone, `dev` overlays dev.yaml."""

    layers = {"app": ["app.yaml"], "dev": ["app.yaml", "dev.yaml"]}
    if profile not in layers:
        raise ConfigError(f"Unknown profile: {profile}")
    return [configs_dir / name for name in layers[profile]]
