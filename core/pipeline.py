"""Pipeline ordering for the simulation tick loop."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Tuple

# Sensors read the world before any creature moves; every brain thinks on the
# same snapshot, then physics and reproduction apply all decisions.
PIPELINE_ORDER: Tuple[str, ...] = (
    "pre_tick",
    "tiles",
    "sensors",
    "brain",
    "physics",
    "reproduction",
    "log",
)

# Steps receive the EngineContext; typed loosely so this module does not import Engine.
Step = Callable[[Any], None]


class Pipeline:
    """Executes named steps in a fixed, explicit order."""

    def __init__(self, handlers: Dict[str, Step], order: Iterable[str] = PIPELINE_ORDER) -> None:
        self.order = tuple(order)
        missing = [name for name in handlers if name not in self.order]
        if missing:
            raise ValueError(f"Handlers not in pipeline order: {', '.join(missing)}")
        self.handlers = handlers

    def run(self, context: Any) -> None:
        for name in self.order:
            handler = self.handlers.get(name)
            if handler:
                handler(context)


__all__ = ["PIPELINE_ORDER", "Pipeline", "Step"]
