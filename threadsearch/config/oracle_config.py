# threadsearch/config/oracle_config.py
from pydantic import BaseModel, Field


class OracleConfig(BaseModel):
    """
    SimpleOracle 的参数
    """

    base_grow_rate: float = Field(default=1.0015, ge=1.0)
    max_grow_percent: float = Field(default=32.9, ge=1.0)
    weaken_per_thread: float = Field(default=0.05, gt=0.0)
    hack_fraction: float = Field(default=0.002, ge=0.0, le=1.0)
