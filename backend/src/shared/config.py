from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
