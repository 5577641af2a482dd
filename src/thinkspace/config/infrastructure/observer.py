"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, model: str) -> None:
        self._log.info("config.loaded", name=name, model=model)

    def config_model_temperature_warning(self, temperature: float) -> None:
        self._log.warning(
            "config.model_temperature_warning",
            temperature=temperature,
            message="Model temperature > 1.0 makes tool calls erratic",
        )
