"""Run configuration: CLI flags, an optional YAML file, then the environment.

Environment variables (a .env file in the working directory is loaded first):
    BOOTCODE_INPUT    default program path (instructions.txt)
    BOOTCODE_VERBOSE  1/true/yes to print the loop and every repair attempt
"""

import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

DEFAULT_INPUT = "instructions.txt"

_TRUE = {"1", "true", "yes", "on"}


@dataclass
class RunConfig:
    input: str = DEFAULT_INPUT
    verbose: bool = False
    trace: bool = False


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUE


def config_from_env() -> Dict[str, Any]:
    """Read settings from the environment, loading .env without overriding real env vars."""
    load_dotenv(find_dotenv(usecwd=True))
    values: Dict[str, Any] = {}
    if os.environ.get("BOOTCODE_INPUT"):
        values["input"] = os.environ["BOOTCODE_INPUT"]
    if "BOOTCODE_VERBOSE" in os.environ:
        values["verbose"] = _env_flag("BOOTCODE_VERBOSE")
    return values


def load_config_file(path: str) -> Dict[str, Any]:
    """Load settings from a YAML file, e.g.:

        input: puzzles/day8.txt
        verbose: true
        trace: false
    """
    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Config file {path} is not valid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(RunConfig)}
    unknown = sorted(str(key) for key in set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    if "input" in data and not isinstance(data["input"], str):
        raise ValueError("'input' must be a path string")
    for key in ("verbose", "trace"):
        if key in data and not isinstance(data[key], bool):
            raise ValueError(f"'{key}' must be true or false")
    return data


def resolve_config(config_path: Optional[str] = None, **overrides: Any) -> RunConfig:
    """Merge defaults < environment < YAML file < explicit overrides (None means unset)."""
    values: Dict[str, Any] = {}
    values.update(config_from_env())
    if config_path:
        values.update(load_config_file(config_path))
    values.update({k: v for k, v in overrides.items() if v is not None})
    return RunConfig(**values)
