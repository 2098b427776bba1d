from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "dexparser"
    chain_id: str = "dimension_37"
    dex_type: str = "dezswap"
    factory_address: str = ""  # empty = per-chain default
    lcd_url: str = "http://localhost:1317"
    lcd_rate_per_second: float = 5.0
    same_height_tolerance: int = 3
    pool_snapshot_interval: int = 100
    validation_interval: int = 100
    debug: bool = False

    @property
    def database_url(self) -> str:
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    class Config:
        env_file = ".env"


settings = Settings()
