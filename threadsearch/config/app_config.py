#!filepath: threadsearch/config/app_config.py
import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .oracle_config import OracleConfig
from .search_config import SearchConfig
from threadsearch.utils.logger import logs

LOG_LEVEL_ENV = "THREADSEARCH_LOG_LEVEL"


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    threadsearch/config/app_config.py → threadsearch/config → threadsearch → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    oracle: OracleConfig = Field(default_factory=OracleConfig)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 threadsearch/config/base.yml
        - 不依赖当前工作目录
        - THREADSEARCH_LOG_LEVEL 覆盖 log.level
        """
        env_path = os.path.join(project_root(), ".env")
        load_dotenv(env_path)

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        level = os.getenv(LOG_LEVEL_ENV)
        if level:
            raw.setdefault("log", {})["level"] = level

        logs.debug(f"[AppConfig] loaded {path}")
        return cls(**raw)
