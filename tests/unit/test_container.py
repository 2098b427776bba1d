from dependency_injector import providers

from dexparser.config import Settings
from dexparser.container import Container
from dexparser.infra.source.lcd_store import LcdSourceStore
from dexparser.parser.dex.starfleit import StarfleitProfile
from dexparser.rules import starfleit as sf


def _container(**overrides) -> Container:
    container = Container()
    container.settings.override(providers.Object(Settings(**overrides)))
    return container


class TestContainer:
    def test_target_app_from_settings(self):
        app = _container(dex_type="starfleit", chain_id="fetchhub-4").target_app()
        assert isinstance(app.profile, StarfleitProfile)
        assert app.profile.factory_address == sf.FACTORY_ADDRESS["fetchhub"]

    def test_factory_override(self):
        app = _container(dex_type="starfleit", chain_id="fetchhub-4", factory_address="fetch1custom").target_app()
        assert app.profile.factory_address == "fetch1custom"

    def test_source_store(self):
        store = _container(lcd_url="http://lcd.local").source_store()
        assert isinstance(store, LcdSourceStore)

    def test_database_url(self):
        settings = Settings(db_user="u", db_password="p", db_host="h", db_port=1, db_name="d")
        assert settings.database_url == "postgresql+asyncpg://u:p@h:1/d"
