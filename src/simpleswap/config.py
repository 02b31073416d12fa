import tomllib
from pathlib import Path
from typing import Literal

import tomlkit
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from simpleswap.constants import PRICE_SCALE
from simpleswap.logging import logger

CONFIG_DIR = Path.home() / ".config" / "simpleswap"
CONFIG_FILE = CONFIG_DIR / "config.toml"


class PoolSettings(BaseModel):
    price_scale: int = Field(default=PRICE_SCALE, gt=0)
    claim_token_name: str = "Simple Swap"
    claim_token_symbol: str = "SSWP"
    claim_token_decimals: int = Field(default=18, ge=0)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SIMPLESWAP_",
        env_nested_delimiter="__",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    pool: PoolSettings = PoolSettings()


def load_config_from_file(config_path: Path) -> Settings:
    return Settings.model_validate(
        tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )
    logger.info(f"Saved configuration to {config_path}.")


if CONFIG_FILE.exists():
    settings = load_config_from_file(CONFIG_FILE)
else:
    settings = Settings()

logger.setLevel(settings.log_level)
