"""Single entry point from a resolved configuration to rendered output."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..render.calendar import StrftimeFormatter
from ..render.template import TemplateRenderer
from ..resolver import resolve_run
from .clock import SystemClock
from .context import Context
from .types import ElapsedTime, Now, TimeSpec

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "%#c"


@dataclass(frozen=True)
class CoreConfig:
    """Everything a run needs, with all defaults already applied."""

    format: str = DEFAULT_FORMAT
    code_char: str = "%"
    time1: TimeSpec = field(default_factory=Now)
    time2: TimeSpec | None = None
    time_zone: str | None = None


def run_core(
    config: CoreConfig,
    clock: SystemClock | None = None,
    formatter: StrftimeFormatter | None = None,
) -> str:
    """Resolve the configured time(s) and render the format template.

    Returns the rendered text, always ending in a newline.

    Raises:
        CoreError: A time couldn't be resolved. Nothing is rendered.
    """
    renderer = TemplateRenderer(formatter, config.code_char)
    ctx = Context.capture(clock, config.time_zone)
    result = resolve_run(ctx, config.time1, config.time2)
    logger.debug(
        "Rendering %s result with delta=%d",
        "elapsed" if isinstance(result, ElapsedTime) else "absolute",
        result.delta_seconds,
    )
    return renderer.render(config.format, result.calendar, result.delta_seconds)
