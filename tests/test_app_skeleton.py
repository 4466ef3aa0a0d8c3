"""
Wiring tests for the application bootstrap, configuration, logging and CLI.
"""

from importlib import import_module
import io
import json
import logging
from pathlib import Path
from typing import Tuple

import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

import main as cli
from stylist_app.app import EXIT_INPUT_CLOSED, EXIT_OK, OutfitRecommenderApp
from stylist_app.config import AppConfig
from stylist_app.logging_config import JsonFormatter, correlation_context, log_event, redact_for_log


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "APP_ENV",
        "APP_CONFIG_PATH",
        "APP_CONFIG_DIR",
        "LOG_LEVEL",
        "USE_COLOR",
        "NO_COLOR",
        "LOADING_DELAY_SECONDS",
        "LOADING_STEPS",
        "DEFAULT_CITY",
        "DEFAULT_CONDITION",
    ):
        monkeypatch.delenv(key, raising=False)


def _quiet_config(**overrides) -> AppConfig:
    return AppConfig(use_color=False, loading_delay_seconds=0.0, **overrides)


def test_config_defaults(clean_env: None) -> None:
    config = AppConfig.from_env()
    assert config.log_level == "WARNING"
    assert config.use_color is True
    assert config.default_city == "Unknown City"
    assert config.default_condition == "Clear"


def test_config_reads_file_and_env_overrides(
    clean_env: None, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    config_dir = tmp_path / "environments"
    config_dir.mkdir()
    (config_dir / "demo.yaml").write_text(
        "# demo settings\nloading_steps: 2\ndefault_city: 'Springfield'\nuse_color: false\n"
    )
    monkeypatch.setenv("APP_ENV", "demo")
    monkeypatch.setenv("APP_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("LOADING_STEPS", "6")

    config = AppConfig.from_env()

    assert config.environment == "demo"
    assert config.default_city == "Springfield"
    assert config.loading_steps == 6
    assert config.use_color is False


def test_no_color_env_disables_color(clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert AppConfig.from_env().use_color is False


def test_invalid_boolean_flag_is_rejected(clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USE_COLOR", "maybe")
    with pytest.raises(ValueError):
        AppConfig.from_env()


def test_app_runs_scripted_session() -> None:
    out = io.StringIO()
    app = OutfitRecommenderApp(
        config=_quiet_config(),
        in_stream=io.StringIO("Nairobi\n22\nDrizzle\n1\n2\n3\n2\n"),
        out_stream=out,
        configure_logs=False,
    )

    assert app.run() == EXIT_OK
    transcript = out.getvalue()
    assert "Style: Smart Casual" in transcript
    assert "Accessory: Stylish Watch" in transcript
    assert "Footwear: Casual Loafers" in transcript
    assert app.memory.recall().city == "Nairobi"


def test_blank_configured_defaults_fall_back(clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_CITY", "   ")
    monkeypatch.setenv("DEFAULT_CONDITION", "\t")

    config = AppConfig.from_env()

    assert config.default_city == "Unknown City"
    assert config.default_condition == "Clear"
    assert _quiet_config(default_city=" ", default_condition="").default_city == "Unknown City"


def test_app_survives_whitespace_default_city() -> None:
    out = io.StringIO()
    app = OutfitRecommenderApp(
        config=_quiet_config(default_city="   ", default_condition="  "),
        in_stream=io.StringIO("\n12\n\n1\n1\n1\n2\n"),
        out_stream=out,
        configure_logs=False,
    )

    assert app.run() == EXIT_OK
    transcript = out.getvalue()
    assert "Weather Summary for Unknown City" in transcript
    assert "Using default condition: Clear" in transcript
    assert app.memory.recall().city == "Unknown City"


def test_app_exits_when_input_closes() -> None:
    out = io.StringIO()
    app = OutfitRecommenderApp(
        config=_quiet_config(),
        in_stream=io.StringIO("Nairobi\n"),
        out_stream=out,
        configure_logs=False,
    )

    assert app.run() == EXIT_INPUT_CLOSED
    assert "Input closed. Exiting." in out.getvalue()


def test_cli_flags_override_config(clean_env: None) -> None:
    args = cli.build_parser().parse_args(["--no-color", "--no-animation", "--log-level", "debug"])

    config = cli.config_from_args(args)

    assert config.use_color is False
    assert config.loading_delay_seconds == 0.0
    assert config.log_level == "DEBUG"


def test_json_formatter_redacts_city() -> None:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    logger = logging.getLogger("tests.json_formatter")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    try:
        with correlation_context("cycle-1"):
            log_event(logger, logging.INFO, "observation_assessed", city="Paris", band="cold")
    finally:
        logger.removeHandler(handler)

    payload = json.loads(stream.getvalue())
    assert payload["event"] == "observation_assessed"
    assert payload["correlation_id"] == "cycle-1"
    assert payload["city"] == "[redacted]"
    assert payload["band"] == "cold"


def test_redact_for_log_only_hides_city() -> None:
    assert redact_for_log("Rome") == "Rome"
    assert redact_for_log({"band": "hot", "temperature": 31.0}) == {"band": "hot", "temperature": 31.0}
    assert redact_for_log({"nested": {"city": "Rome"}}) == {"nested": {"city": "[redacted]"}}


@pytest.mark.parametrize(
    "module_path, public_members",
    [
        ("logic.temperature_classifier", ("classify",)),
        ("logic.condition_advisor", ("advise", "CONDITION_RULES")),
        ("logic.catalog_selector", ("catalogs_for", "build_recommendation", "OutOfRangeSelection")),
        ("logic.recommendation_engine", ("RecommendationEngine", "WeatherAssessment")),
        ("memory.session_memory", ("SessionMemory",)),
        ("console.shell", ("OutfitShell", "InputClosed")),
        ("tools.observability", ("instrument_operation",)),
    ],
)
def test_modules_export_expected_members(module_path: str, public_members: Tuple[str, ...]) -> None:
    """Modules should import cleanly and expose expected members."""

    module = import_module(module_path)
    for member in public_members:
        assert hasattr(module, member), f"{module_path} is missing {member}"


def test_package_readme_is_the_project_readme() -> None:
    root = Path(__file__).resolve().parents[1]
    pyproject = (root / "pyproject.toml").read_text()

    assert 'readme = "README.md"' in pyproject
    assert (root / "README.md").read_text().startswith("# Weather Outfit Recommender")
