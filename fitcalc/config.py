from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Reports go to stdout; log records go to stderr at this level.
    log_level: str = "WARNING"

    model_config = {"env_prefix": "FITCALC_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
