from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings): # load all RUNEROLL_key=value pairs from env or .env
    """ Engine tuning"""
    SOLVER_MAX_STEPS: int = Field(2000, ge=0) # BFS depth cap, see solver_services.search
    GENERATOR_WIPE_STRIDE: int = Field(8, ge=1)
    GENERATOR_PICKUP_STRIDE: int = Field(5, ge=1)
    GENERATOR_GATE_STRIDE: int = Field(6, ge=1)
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = f"{BASE_DIR / 'runeroll_errors.log'}"

    model_config = SettingsConfigDict(
        env_prefix = "RUNEROLL_",
        env_file = BASE_DIR/".env",
        env_file_encoding = "utf-8",
        extra = "ignore",
    )

settings = Settings()
