from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database
    database_url: str = "sqlite:///./stock_api.db"

    # HTTP
    api_prefix: str = ""
    client_origin: str = "http://localhost:7165"

    # Bearer tokens
    token_bytes: int = 16

    log_level: str = "INFO"


settings = Settings()
