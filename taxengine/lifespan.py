from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncContextManager

from fastapi import FastAPI

from taxengine.config import Settings, get_settings
from taxengine.core.rules import TaxRules, load_default_rules

Hook = Callable[[FastAPI], Awaitable[None] | None]
RulesFactory = Callable[[], TaxRules]


def _open_telemetry_sink(logger: logging.Logger, settings: Settings, app_label: str) -> logging.Handler | None:
    if not settings.telemetry_enabled:
        return None
    logs_dir = Path(settings.log_dir)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to create logs directory %s: %s", logs_dir, exc)
        return None
    handler = logging.FileHandler(logs_dir / f"{app_label}.log", encoding="utf-8")
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    logger.addHandler(handler)
    return handler


async def _invoke_hook(hook: Hook | None, app: FastAPI) -> None:
    if hook is None:
        return
    try:
        result = hook(app)
        if inspect.isawaitable(result):
            await result  # type: ignore[func-returns-value]
    except Exception:  # pragma: no cover - hooks are user provided
        logging.getLogger("taxengine").exception("Application lifecycle hook failed")


def build_application_lifespan(
    app_label: str,
    *,
    rules_factory: RulesFactory = load_default_rules,
    startup_hook: Hook | None = None,
    shutdown_hook: Hook | None = None,
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    base_logger = logging.getLogger("taxengine")

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = get_settings()
        logger = base_logger.getChild(app_label)
        # An invalid bracket schedule fails here, before any request is served.
        rules = rules_factory()
        telemetry_handler = _open_telemetry_sink(logger, settings, app_label)

        app.state.settings = settings
        app.state.rules = rules
        app.state.telemetry_handler = telemetry_handler
        app.state.app_label = app_label

        logger.info("Startup complete: tax_years=%s", ",".join(str(y) for y in rules.years))

        try:
            await _invoke_hook(startup_hook, app)
            yield
        finally:
            await _invoke_hook(shutdown_hook, app)
            if telemetry_handler is not None:
                logger.removeHandler(telemetry_handler)
                telemetry_handler.close()
            for attr in ("settings", "rules", "telemetry_handler", "app_label"):
                if hasattr(app.state, attr):
                    delattr(app.state, attr)
            logger.info("Shutdown complete")

    return _lifespan
