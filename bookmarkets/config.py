from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    host: str = "localhost"
    port: int = 4000
    graphql_path: str = "/graphql"
    log_level: str = "INFO"
    check_integrity: bool = True
    debug: bool = False

    model_config = SettingsConfigDict(env_prefix="BOOKMARKETS_", extra="ignore")
