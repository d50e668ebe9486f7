"""
libc数据库HTTP客户端
"""
from typing import Dict, Optional

import requests
from rich.console import Console

from .config import DEFAULT_BASE_URL
from .errors import RemoteRejection, TransportFailure
from .request import RequestDescriptor

console = Console(stderr=True)


class LibcDbClient:
    """对requests.Session的简单封装,所有请求同步阻塞、不重试"""
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: Optional[float] = 30,
                 proxies: Optional[Dict[str, str]] = None, verbose: bool = False):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verbose = verbose
        self.session = requests.Session()
        if proxies:
            self.session.proxies.update(proxies)

    def __enter__(self) -> "LibcDbClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        if self.verbose:
            console.print(f"[cyan]{method} {url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TransportFailure(f"{method} {url} failed: {e}") from e

        if not response.ok:
            raise RemoteRejection(response.status_code, url)
        return response

    def send(self, descriptor: RequestDescriptor) -> requests.Response:
        """
        发送请求描述对应的请求

        Raises:
            TransportFailure: 网络错误
            RemoteRejection: 非成功状态码
        """
        return self._request(descriptor.method, self.url_for(descriptor.path), json=descriptor.body)

    def fetch(self, url: str) -> bytes:
        """GET绝对URL并返回完整响应体"""
        return self._request("GET", url).content
