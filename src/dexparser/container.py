from dependency_injector import containers, providers

from dexparser.config import Settings
from dexparser.db.session import build_engine, build_session_factory
from dexparser.infra.http.rate_limited_client import RateLimitedClient
from dexparser.infra.source.lcd_store import LcdSourceStore
from dexparser.parser.registry import build_target_app


def _factory_address(settings: Settings) -> str | None:
    return settings.factory_address or None


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    engine = providers.Singleton(
        build_engine,
        database_url=settings.provided.database_url,
        echo=settings.provided.debug,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=engine,
    )

    target_app = providers.Singleton(
        build_target_app,
        dex_type=settings.provided.dex_type,
        chain_id=settings.provided.chain_id,
        factory_address=providers.Callable(_factory_address, settings),
    )

    http_client = providers.Singleton(
        RateLimitedClient,
        rate_per_second=settings.provided.lcd_rate_per_second,
    )

    source_store = providers.Singleton(
        LcdSourceStore,
        lcd_url=settings.provided.lcd_url,
        http_client=http_client,
    )
