"""
数据管道异常

业务失败不抛异常，而是以 successful=False 的结果返回；
只有请求对象缺失或格式错误时才抛出 DataPipelineError。
"""

from typing import Optional


class DataPipelineError(Exception):
    """请求缺失或格式错误"""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{message} in {source}"
        super().__init__(message)
