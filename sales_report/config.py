from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "SALES_REPORT_",
    }

    # App
    log_level: str = "INFO"

    # Demo data
    seed_on_startup: bool = True
    seed: int = 42

    # Report
    top_products_limit: int = Field(10, ge=0)


settings = Settings()
