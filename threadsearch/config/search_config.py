# threadsearch/config/search_config.py
from pydantic import BaseModel, Field


class SearchConfig(BaseModel):
    """
    阈值搜索的可调参数。
    只影响 oracle 查询次数，不影响结果正确性。
    """

    # 指数扩张上界时每步的倍数
    seek_multiplier: int = Field(default=2, ge=2)

    # 指数扩张的最大步数，超过即认为 oracle 退化
    max_seek_steps: int = Field(default=64, ge=1)

    validate_monotonic: bool = True
