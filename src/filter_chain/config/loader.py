"""
Configuration Loader - Session Files from YAML.

A session file lists the chains to declare and the initial parameter
values. Profiles sit beside the file under ``profiles/<name>.yaml`` and are
deep-merged over it, so a debug profile can switch logging and preset a few
parameters without repeating the chains.

When the dataset columns are known at load time, every configured chain is
checked against them here, and a misspelt column fails the load instead of
the session start.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Union

import yaml

from filter_chain.config.models import SessionConfig

if TYPE_CHECKING:
    from filter_chain.validation.chain_validator import ChainValidator

logger = logging.getLogger(__name__)

PROFILE_DIR = "profiles"


def merge_config_dicts(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge ``overlay`` into a copy of ``base``.

    Nested mappings (``logging``, ``parameters``) merge key by key. Lists
    such as ``chains`` are replaced whole: a profile that lists chains
    declares the session's complete set.
    """
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_config_dicts(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Reads session YAML files into validated SessionConfig objects."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        validator: Optional["ChainValidator"] = None,
    ) -> None:
        """
        Args:
            base_path: Directory that relative config paths are resolved against
            validator: Chain validator used when columns are given to load()
        """
        self._base_path = Path(base_path) if base_path else Path(".")
        self._validator = validator

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
        columns: Optional[Sequence[str]] = None,
    ) -> SessionConfig:
        """
        Load a session file, optionally with a profile and a column check.

        Args:
            config_path: Session YAML file
            profile: Name of a file in the ``profiles`` directory next to it
            columns: Dataset columns every configured chain must reference

        Returns:
            Validated SessionConfig

        Raises:
            FileNotFoundError: If the session or profile file doesn't exist
            ValidationError: If the merged document is not a valid session
            BadReference: If a chain names a column outside ``columns``
            ChainConfigError: If a chain has no links and columns are checked
        """
        path = self._resolve_path(config_path)
        document = self._read_yaml(path)

        if profile:
            profile_path = path.parent / PROFILE_DIR / f"{profile}.yaml"
            if not profile_path.exists():
                raise FileNotFoundError(f"Profile not found: {profile} ({profile_path})")
            document = merge_config_dicts(document, self._read_yaml(profile_path))
            logger.debug(f"Applied profile '{profile}' to {path.name}")

        return self.load_from_dict(document, columns=columns)

    def load_from_dict(
        self,
        config_dict: Dict[str, Any],
        columns: Optional[Sequence[str]] = None,
    ) -> SessionConfig:
        """Validate a session document, checking columns when they are given."""
        config = SessionConfig.model_validate(config_dict)
        if columns is not None:
            self.check_columns(config, columns)
        return config

    def check_columns(self, config: SessionConfig, columns: Sequence[str]) -> None:
        """Run the chain validator over every configured chain."""
        validator = self._validator
        if validator is None:
            # deferred: the validation package imports config.models
            from filter_chain.validation.chain_validator import ChainValidator

            validator = ChainValidator()
        for chain in config.chains:
            validator.validate(chain, columns)
        logger.debug(f"Checked {len(config.chains)} chain(s) against {len(columns)} columns")

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    columns: Optional[Sequence[str]] = None,
    base_path: Optional[Path] = None,
) -> SessionConfig:
    """Load a session file with a default ConfigLoader."""
    return ConfigLoader(base_path=base_path).load(config_path, profile, columns=columns)
