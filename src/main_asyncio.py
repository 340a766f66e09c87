"""
main_asyncio.py - Application entry point for LED Pattern Studio
----------------------------------------------------------------

Responsible for:
- loading configuration and configuring the logger
- wiring the preview session into the API (Dependency Injection)
- running the API server in the asyncio loop
- graceful shutdown on Ctrl+C / SIGTERM
"""

import sys

# ---------------------------------------------------------------------------
# UTF-8 ENCODING FIX
# ---------------------------------------------------------------------------

if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and sys.stderr.encoding != 'UTF-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import asyncio
import signal

import uvicorn
from fastapi import FastAPI

from api.dependencies import set_service_container
from api.main import create_app
from managers import ConfigManager
from models.enums import LogCategory
from services import PreviewSessionService, ServiceContainer
from utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.SYSTEM)


# ---------------------------------------------------------------------------
# API SERVER RUNNER
# ---------------------------------------------------------------------------

async def run_api_server(app: FastAPI, host: str = "0.0.0.0", port: int = 8000) -> None:
    """
    Run FastAPI/Uvicorn server in asyncio event loop.

    Disables uvicorn's own signal handlers; main() owns SIGINT/SIGTERM.
    The server runs until cancelled.
    """
    config = uvicorn.Config(
        app=app,
        host=host,
        port=port,
        loop="asyncio",
        log_level="info",
        access_log=False,
    )

    server = uvicorn.Server(config)
    server.install_signal_handlers = lambda: None

    try:
        log.debug(f"🌐 Starting API server on {host}:{port}")
        await server.serve()
    except asyncio.CancelledError:
        log.debug("🌐 API server cancelled (expected during shutdown)")
        raise


def install_shutdown_signals(loop: asyncio.AbstractEventLoop, shutdown_event: asyncio.Event) -> None:
    """Set shutdown_event on SIGINT / SIGTERM"""

    def signal_handler(sig: signal.Signals) -> None:
        log.info(f"Signal {sig.name} received → triggering shutdown")
        shutdown_event.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, lambda s=sig: signal_handler(s))
        except NotImplementedError:
            # Windows event loops have no add_signal_handler; Ctrl+C raises KeyboardInterrupt
            log.debug(f"Signal handler for {sig.name} not supported on this platform")


# ---------------------------------------------------------------------------
# Application Entry
# ---------------------------------------------------------------------------

async def main():
    """Main async entry point (dependency injection and event loop startup)."""

    # ========================================================================
    # 1. CONFIGURATION
    # ========================================================================

    config_manager = ConfigManager()
    config_manager.load()
    configure_logger(config_manager.log_level, config_manager.use_colors)

    log.info("Starting LED Pattern Studio...")

    # ========================================================================
    # 2. PREVIEW SESSION
    # ========================================================================

    session = PreviewSessionService(
        config=config_manager.get_strip_config(),
        pattern=config_manager.get_default_pattern(),
        firmware_options=config_manager.get_firmware_options(),
        min_interval_ms=config_manager.min_interval_ms,
    )
    session.render()

    log.info(
        "Preview session ready",
        pattern=session.pattern_name,
        led_count=session.config.led_count,
        interval_ms=session.clock.interval_ms,
    )

    # ========================================================================
    # 3. SERVICE CONTAINER
    # ========================================================================

    services = ServiceContainer(session_service=session)
    set_service_container(services)
    log.info("Service container registered with API")

    # ========================================================================
    # 4. API SERVER
    # ========================================================================

    app = create_app()
    api_task = asyncio.create_task(
        run_api_server(app, config_manager.api_host, config_manager.api_port),
        name="FastAPI/Uvicorn Server",
    )

    # ========================================================================
    # 5. SHUTDOWN
    # ========================================================================

    shutdown_event = asyncio.Event()
    install_shutdown_signals(asyncio.get_running_loop(), shutdown_event)

    log.info("🏁 Application initialized. Waiting for exit signal...")

    shutdown_wait = asyncio.create_task(shutdown_event.wait())
    done, _ = await asyncio.wait({api_task, shutdown_wait}, return_when=asyncio.FIRST_COMPLETED)

    if api_task in done and not api_task.cancelled() and api_task.exception() is not None:
        log.error(f"API server failed: {api_task.exception()}")

    session.stop()
    set_service_container(None)

    for task in (api_task, shutdown_wait):
        if not task.done():
            task.cancel()
    await asyncio.gather(api_task, shutdown_wait, return_exceptions=True)

    log.info("👋 LED Pattern Studio shut down cleanly.")


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
    except Exception as e:
        log.error(f"Fatal error: {e}")
        sys.exit(1)
