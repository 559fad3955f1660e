from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Protocol, List, Optional

from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    created_by: Optional[str] = None
    companies: list = field(default_factory=list)
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
            started = time.perf_counter()
            ctx = step.run(ctx)
            logger.debug(
                "Step finished",
                extra={
                    "op": type(step).__name__,
                    "status": "ok",
                    "count": len(ctx.companies),
                    "duration_ms": int((time.perf_counter() - started) * 1000),
                },
            )
        return ctx
