from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    API_BASE_URL: str | None = None
    API_TOKEN: str | None = None
    HTTP_TIMEOUT_SECONDS: float = 10.0

    STORE_PROVIDER: str = "json"
    DATA_DIR: str = "./data/slots"
    FILTER_SLOT_KEY: str = "searchkeys"


settings = Settings()
