from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Pet Feeding Calculator API"
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
