#!filepath: threadsearch/utils/errors.py


class ThreadSearchError(RuntimeError):
    """
    threadsearch 所有异常的基类。
    """


class UserInputError(ThreadSearchError):
    """
    Raised for invalid caller-provided values (money, security, cores, threads).
    Should NOT print traceback.
    """


class OracleContractError(ThreadSearchError):
    """
    Oracle 返回值超出其约定的取值范围。
    """


class DegenerateOracleError(OracleContractError):
    """
    Oracle 对任意线程数都没有有效产出（例如 weaken 为 0、hack 每线程取整后为 0）。
    """


class NonMonotonicOracleError(OracleContractError):
    """
    Oracle 对线程数不是单调不减的，二分搜索的前提不成立。
    """
