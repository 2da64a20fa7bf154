from .app_config import AppConfig
from .log_config import LogConfig
from .oracle_config import OracleConfig
from .search_config import SearchConfig

__all__ = ["AppConfig", "LogConfig", "OracleConfig", "SearchConfig"]
