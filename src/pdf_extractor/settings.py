from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PDF_EXTRACTOR_", env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    window_title: str = "PDF Extractor"
    window_width: int = 520
    window_height: int = 300
    page_separator: str = "\n"


settings = Settings()
