"""Configuration helpers for the weather outfit recommender."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_CITY = "Unknown City"
DEFAULT_CONDITION = "Clear"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _as_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"Expected a boolean flag, got '{value}'")


@dataclass
class AppConfig:
    """Configuration values for the interactive recommender.

    Only presentation and ambient settings live here. The outfit catalogs and
    classification thresholds are fixed data shipped with the code.
    """

    log_level: str = "WARNING"
    use_color: bool = True
    loading_delay_seconds: float = 0.25
    loading_steps: int = 4
    default_city: str = DEFAULT_CITY
    default_condition: str = DEFAULT_CONDITION
    environment: str | None = None

    def __post_init__(self) -> None:
        self.default_city = (self.default_city or "").strip() or DEFAULT_CITY
        self.default_condition = (self.default_condition or "").strip() or DEFAULT_CONDITION

    @classmethod
    def from_env(cls, config_path: str | None = None) -> "AppConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default. Environment variables win over file values so a single run can
        be tweaked without editing files. An explicit ``config_path`` wins over
        ``APP_CONFIG_PATH``.
        """

        env_name = os.getenv("APP_ENV")
        config_path = config_path or os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("APP_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        use_color = _as_bool(get_value("use_color"), True)
        if os.getenv("NO_COLOR"):
            use_color = False

        return cls(
            log_level=str(get_value("log_level", "WARNING") or "WARNING").upper(),
            use_color=use_color,
            loading_delay_seconds=float(get_value("loading_delay_seconds", "0.25") or 0.0),
            loading_steps=int(get_value("loading_steps", "4") or 0),
            default_city=(get_value("default_city") or "").strip() or DEFAULT_CITY,
            default_condition=(get_value("default_condition") or "").strip() or DEFAULT_CONDITION,
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
