from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./receipts.db"
    AUTO_CREATE_TABLES: bool = True
    SQL_ECHO: bool = False

    APP_NAME: str = "Receipt Processor"
    LOG_LEVEL: str = "INFO"
    ENV: str = "dev"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
