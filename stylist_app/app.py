"""Application bootstrap for the console recommender."""

from __future__ import annotations

import logging
import sys
import time
from typing import Callable, TextIO

from console.renderer import ConsoleRenderer
from console.shell import InputClosed, OutfitShell
from console.styles import Palette
from logic.recommendation_engine import RecommendationEngine
from memory.session_memory import SessionMemory
from stylist_app.config import AppConfig
from stylist_app.logging_config import configure_logging, get_logger, log_event

LOGGER = get_logger(__name__)

EXIT_OK = 0
EXIT_INPUT_CLOSED = 1
EXIT_INTERRUPTED = 130


class OutfitRecommenderApp:
    """Wires together configuration, logging, the engine and the console."""

    def __init__(
        self,
        config: AppConfig | None = None,
        in_stream: TextIO | None = None,
        out_stream: TextIO | None = None,
        sleep: Callable[[float], None] = time.sleep,
        configure_logs: bool = True,
    ) -> None:
        self.config = config or AppConfig.from_env()
        if configure_logs:
            configure_logging(self.config.log_level)

        self.in_stream = in_stream or sys.stdin
        self.out_stream = out_stream or sys.stdout
        self.engine = RecommendationEngine()
        self.memory = SessionMemory()
        self.renderer = ConsoleRenderer(
            self.out_stream,
            palette=Palette.for_terminal(self.config.use_color),
            sleep=sleep,
            loading_delay_seconds=self.config.loading_delay_seconds,
            loading_steps=self.config.loading_steps,
        )
        self.shell = OutfitShell(
            engine=self.engine,
            memory=self.memory,
            renderer=self.renderer,
            in_stream=self.in_stream,
            default_city=self.config.default_city,
            default_condition=self.config.default_condition,
        )

    def run(self) -> int:
        """Run the interactive loop and return a process exit status."""

        log_event(
            LOGGER,
            logging.INFO,
            "app_started",
            environment=self.config.environment or "local",
            use_color=self.config.use_color,
        )
        try:
            cycles = self.shell.run()
        except InputClosed as exc:
            log_event(LOGGER, logging.WARNING, "app_input_closed", prompt=exc.prompt.strip())
            self.renderer.error("Input closed. Exiting.")
            return EXIT_INPUT_CLOSED
        except KeyboardInterrupt:
            log_event(LOGGER, logging.INFO, "app_interrupted")
            self.renderer.line()
            return EXIT_INTERRUPTED

        log_event(LOGGER, logging.INFO, "app_completed", cycles=cycles)
        return EXIT_OK


__all__ = ["EXIT_INPUT_CLOSED", "EXIT_INTERRUPTED", "EXIT_OK", "OutfitRecommenderApp"]
