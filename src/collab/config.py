"""Configuration loading from environment variables and collab.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_CONCEPTS_DIR = Path("concepts")
_CONFIG_FILENAME = "collab.toml"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ConceptsConfig:
    """Where concepts live and how they are referenced."""

    directory: Path = _DEFAULT_CONCEPTS_DIR
    extension: str = ".md"
    marker_tag: str = "cf"
    inject_preamble: bool = True


@dataclass
class CollabConfig:
    """Top-level configuration."""

    concepts: ConceptsConfig = field(default_factory=ConceptsConfig)
    system_prompt: str = ""
    log_level: str = "INFO"


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def load_config(config_path: Path | None = None) -> CollabConfig:
    """Load configuration from environment variables and optional collab.toml.

    Priority: environment variables > collab.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.collab/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".collab" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    concepts_data = file_data.get("concepts", {})

    extension = str(os.getenv("COLLAB_EXTENSION", concepts_data.get("extension", ".md")))
    if not extension.startswith("."):
        extension = "." + extension

    config = CollabConfig(
        concepts=ConceptsConfig(
            directory=Path(
                os.getenv(
                    "COLLAB_CONCEPTS_DIR",
                    concepts_data.get("directory", str(_DEFAULT_CONCEPTS_DIR)),
                )
            ).expanduser(),
            extension=extension,
            marker_tag=os.getenv("COLLAB_MARKER_TAG", concepts_data.get("marker_tag", "cf")),
            inject_preamble=_as_bool(
                os.getenv("COLLAB_PREAMBLE", concepts_data.get("inject_preamble", True))
            ),
        ),
        system_prompt=file_data.get("system_prompt", ""),
        log_level=os.getenv("COLLAB_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
    return config
