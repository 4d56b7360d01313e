from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "Asset Costing API"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]
    docs_enabled: bool = True
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_file = ".env"
        env_prefix = "COSTING_"
