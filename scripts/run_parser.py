"""Sync the configured DEX deployment from its LCD node, one pass or in a loop.

Usage:
    PYTHONPATH=src python scripts/run_parser.py            # loop every POLL_SECONDS
    PYTHONPATH=src python scripts/run_parser.py --once
"""

import asyncio
import logging
import sys

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

logger = logging.getLogger("run_parser")

POLL_SECONDS = 5


async def main(once: bool) -> None:
    from dexparser.container import Container
    from dexparser.runner import DexRunner

    container = Container()
    settings = container.settings()
    app = container.target_app()
    runner = DexRunner(
        app=app,
        source=container.source_store(),
        session_factory=container.session_factory(),
        same_height_tolerance=settings.same_height_tolerance,
        pool_snapshot_interval=settings.pool_snapshot_interval,
        validation_interval=settings.validation_interval,
    )
    logger.info("Parsing %s on %s (factory %s)", app.profile.name, app.chain_id, app.profile.factory_address)

    try:
        while True:
            await runner.run()
            if once:
                break
            await asyncio.sleep(POLL_SECONDS)
    finally:
        await container.http_client().close()
        await container.engine().dispose()


if __name__ == "__main__":
    asyncio.run(main(once="--once" in sys.argv[1:]))
