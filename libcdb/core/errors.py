"""
libc-db错误类型
"""
from typing import Optional


class LibcDbError(Exception):
    """所有libc-db错误的基类"""


class MalformedInput(LibcDbError):
    """用户输入不符合语法约定"""
    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw


class TransportFailure(LibcDbError):
    """网络请求未能完成(DNS、连接、TLS、超时)"""


class RemoteRejection(LibcDbError):
    """服务端返回了非成功状态码"""
    def __init__(self, status_code: int, url: str):
        super().__init__(f"Remote service returned HTTP {status_code} for {url}")
        self.status_code = status_code
        self.url = url


class ResponseShapeError(LibcDbError):
    """响应体无法解析为预期结构"""


class PersistenceFailure(LibcDbError):
    """写入下载文件失败"""
