import requests

from .constants import USER_AGENT


class RequestsHttpClient:
    """
    默认的 HTTP 客户端。可替换为任何提供 post(url, data) -> requests.Response 的对象。
    """

    def __init__(self, session: requests.Session | None = None, timeout: float = 30):
        self.session = session or requests.Session()
        self.timeout = timeout

    def post(self, url: str, data: dict) -> requests.Response:
        return self.session.request(
            method="POST",
            url=url,
            headers={
                "Content-Type": "application/x-www-form-urlencoded",
                "User-Agent": USER_AGENT,
            },
            data=data,
            timeout=self.timeout,
        )
