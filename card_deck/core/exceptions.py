"""
牌组模块异常定义
区分调用方的编程错误(向上抛)和可以平滑降级的边界情况(不抛异常)
"""


class DeckError(Exception):
    """牌组基础异常类"""
    pass


class RandomSourceError(DeckError):
    """随机源返回了非整数或越界的值"""
    pass


class RandomSourceExhaustedError(RandomSourceError):
    """脚本化随机源的预设数值已用完"""
    pass


class DeckConfigError(DeckError, ValueError):
    """牌组配置错误异常"""
    pass
