from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "GrubDash"
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    # JSON file with {"dishes": [...], "orders": [...]} loaded into the stores at startup
    seed_file: str | None = None

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
