"""Configuration loading with priority: env > config file > defaults."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv
from loguru import logger
from pydantic import BaseModel, ValidationError

from ocibucket.exceptions import ConfigError, InteractiveModeRequiredError

CONFIG_DIR = Path.home() / ".config" / "ocibucket"
CONFIG_PATH = CONFIG_DIR / "config.yaml"

_SECTION_KEY = "bucket"
_STRING_FIELDS = ("bucket_name", "namespace", "executable")


def is_interactive_disabled() -> bool:
    """Return True when OCIBUCKET_NO_INTERACTIVE is 'true' (case-insensitive)."""
    return os.environ.get("OCIBUCKET_NO_INTERACTIVE", "").lower() == "true"


def require_interactive(hint: str) -> None:
    """Raise if interactive prompts are disabled.

    Parameters
    ----------
    hint:
        Human-readable explanation of which CLI flag / env var the caller
        should use instead of an interactive prompt.

    """
    if is_interactive_disabled():
        raise InteractiveModeRequiredError(
            f"Interactive prompt required but OCIBUCKET_NO_INTERACTIVE=true. {hint}"
        )


def load_env_file(path: Path | None = None) -> bool:
    """Load a ``.env`` file into ``os.environ`` without overriding set values.

    Without *path* the nearest ``.env`` from the working directory upward is used.

    Returns True when a file was found and read.
    """
    env_path = path or find_dotenv(usecwd=True)
    if not env_path:
        return False
    loaded = load_dotenv(dotenv_path=env_path, override=False)
    if loaded:
        logger.trace(f"Loaded environment from {env_path}")
    return loaded


def get_config_path(config_path: Path | None = None) -> Path:
    """Return path to config file.

    Uses *config_path* if provided, otherwise OCIBUCKET_CONFIG env var,
    otherwise default CONFIG_PATH.
    """
    if config_path is not None:
        return config_path
    path = os.environ.get("OCIBUCKET_CONFIG")
    return Path(path) if path else CONFIG_PATH


def _load_raw_yaml(path: Path) -> dict[str, object]:
    """Load a YAML file and return its top-level mapping (or empty dict)."""
    if not path.is_file():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        logger.warning(f"Invalid config format in {path}; expected mapping.")
        return {}
    return data


def _parse_timeout(raw: str | None) -> float | None:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid OCIBUCKET_TIMEOUT value: {raw!r}")
        return None


class BucketConfig(BaseModel):
    """Target bucket and how to reach the OCI CLI."""

    bucket_name: str = ""
    namespace: str = ""
    executable: str = "oci"
    timeout: float | None = None

    @classmethod
    def _from_bucket_section(cls, data: dict[str, object]) -> BucketConfig:
        """Build from a raw YAML top-level dict (reads the ``bucket`` key)."""
        section = data.get(_SECTION_KEY, {})
        if not isinstance(section, dict):
            return cls()
        fields = {k: v for k, v in section.items() if k in cls.model_fields}
        # YAML reads `bucket_name: 2024` as an int
        for key in _STRING_FIELDS:
            value = fields.get(key)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                fields[key] = str(value)
        try:
            return cls(**fields)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid '{_SECTION_KEY}' section in config: {e}"
            ) from e

    @classmethod
    def from_file(cls, path: Path = CONFIG_PATH) -> BucketConfig:
        """Load config from a YAML file.  Returns empty config if file is missing.

        Raises ``ConfigError`` when the ``bucket`` section has invalid values.
        """
        if not path.is_file():
            return cls()
        logger.trace(f"Loading config from {path}")
        return cls._from_bucket_section(_load_raw_yaml(path))

    @classmethod
    def from_env(cls) -> BucketConfig:
        """Build config from environment variables.

        ``BUCKET_NAME`` and ``NAMESPACE`` keep the names used by existing
        ``.env`` files; the rest are prefixed with ``OCIBUCKET_``.
        """
        return cls(
            bucket_name=os.environ.get("BUCKET_NAME", ""),
            namespace=os.environ.get("NAMESPACE", ""),
            executable=os.environ.get("OCIBUCKET_OCI_EXECUTABLE", ""),
            timeout=_parse_timeout(os.environ.get("OCIBUCKET_TIMEOUT")),
        )

    def merge(self, override: BucketConfig) -> BucketConfig:
        """Return a new config where *override* values take priority over self.

        Only non-empty / non-None values from *override* win.
        """
        return BucketConfig(
            bucket_name=override.bucket_name or self.bucket_name,
            namespace=override.namespace or self.namespace,
            executable=override.executable or self.executable,
            timeout=override.timeout if override.timeout is not None else self.timeout,
        )

    @classmethod
    def load(cls, config_path: Path | None = None) -> BucketConfig:
        """Merge defaults, file, and env: defaults < file < env."""
        file_cfg = cls.from_file(get_config_path(config_path))
        return cls().merge(file_cfg).merge(cls.from_env())

    def require(self) -> BucketConfig:
        """Return self when both bucket name and namespace are set.

        Raises
        ------
        ConfigError
            When either value is empty.

        """
        if not self.bucket_name:
            raise ConfigError("Bucket name has not been set.")
        if not self.namespace:
            raise ConfigError("Namespace has not been set.")
        return self

    def save_to_file(self, path: Path = CONFIG_PATH) -> Path:
        """Write the ``bucket`` section to YAML, preserving other sections."""
        path.parent.mkdir(parents=True, exist_ok=True)
        existing = _load_raw_yaml(path)

        section: dict[str, object] = {
            "bucket_name": self.bucket_name,
            "namespace": self.namespace,
        }
        if self.executable and self.executable != "oci":
            section["executable"] = self.executable
        if self.timeout is not None:
            section["timeout"] = self.timeout
        existing[_SECTION_KEY] = section

        content = yaml.safe_dump(existing, default_flow_style=False, sort_keys=False)
        if not content.endswith("\n"):
            content += "\n"
        path.write_text(content, encoding="utf-8")
        logger.info(f"Config saved to {path}")
        return path
