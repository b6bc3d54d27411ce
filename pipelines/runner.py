from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, Tuple

from utils.logging_setup import init_logging


@dataclass
class RunContext:
    source: Any = None
    headers: List[str] = field(default_factory=list)
    rows: List[Tuple[int, str]] = field(default_factory=list)  # (line number, raw line)
    records: list = field(default_factory=list)
    warnings: list = field(default_factory=list)
    run_id: Optional[str] = None
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            ctx = step.run(ctx)
        return ctx
