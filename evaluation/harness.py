"""Lightweight evaluation harness for scripted console sessions."""

from __future__ import annotations

import io
from typing import Dict, List

from console.renderer import ConsoleRenderer
from console.shell import OutfitShell
from console.styles import Palette
from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.recommendation_engine import RecommendationEngine
from memory.session_memory import SessionMemory


def run_transcript(inputs: List[str]) -> Dict[str, object]:
    """Feed ``inputs`` to a fresh shell and capture everything it prints."""

    in_stream = io.StringIO("".join(f"{line}\n" for line in inputs))
    out_stream = io.StringIO()
    renderer = ConsoleRenderer(out_stream, palette=Palette.plain(), loading_delay_seconds=0.0)
    shell = OutfitShell(
        engine=RecommendationEngine(),
        memory=SessionMemory(),
        renderer=renderer,
        in_stream=in_stream,
    )
    cycles = shell.run()
    return {"cycles": cycles, "transcript": out_stream.getvalue()}


def _evaluate_expectations(scenario: EvaluationScenario, result: Dict[str, object]) -> Dict[str, bool]:
    transcript = str(result["transcript"])
    checks: Dict[str, bool] = {"cycles": result["cycles"] == scenario.expected_cycles}
    for fragment in scenario.expected_fragments:
        checks[f"contains:{fragment}"] = fragment in transcript
    for fragment in scenario.forbidden_fragments:
        checks[f"omits:{fragment}"] = fragment not in transcript
    return checks


def run_scenario(scenario: EvaluationScenario) -> Dict[str, object]:
    result = run_transcript(scenario.inputs)
    checks = _evaluate_expectations(scenario, result)
    return {
        "scenario": scenario.name,
        "passed": all(checks.values()),
        "checks": checks,
        "cycles": result["cycles"],
        "transcript": result["transcript"],
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks", "run_transcript"]
