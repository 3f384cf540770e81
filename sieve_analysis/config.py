from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # "metric" (mm / g) or "imperial" (in / lb)
    SIEVE_DEFAULT_UNITS: str = "metric"
    # Decimal places on the percent passing column
    SIEVE_PASSING_DECIMALS: int = 1

    class Config:
        env_file = ".env"


settings = Settings()
