from datetime import timedelta
from importlib.metadata import version
import logging
from pathlib import Path
import sys
from typing import Literal

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PASSFORGE_")

    default_length: int = 16
    default_format: Literal["text", "json"] = "text"
    log_level: str = "WARNING"
    log_file_path: Path | None = None
    software_version: str = version("passforge")


config = Config()  # type: ignore


class InterceptHandler(logging.Handler):
    def emit(self, record):
        # Get corresponding Loguru level
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller to get correct stack depth
        frame, depth = logging.currentframe(), 2
        while frame.f_back and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

logger.remove()
logger.add(
    sys.stderr,
    level=config.log_level,
    backtrace=True,
    diagnose=False,
)

if config.log_file_path is not None:
    config.log_file_path.parent.mkdir(exist_ok=True, parents=True)

    logger.add(
        config.log_file_path.resolve(),
        rotation="10 MB",
        retention=timedelta(days=7),
        backtrace=True,
        diagnose=False,
        level=config.log_level,
    )
