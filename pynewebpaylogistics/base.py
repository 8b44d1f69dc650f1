import requests
from loguru import logger

from .builders import (
    BaseRequest,
    CreateOrderRequest,
    MapRequest,
    PrintOrderRequest,
    QueryOrderRequest,
)
from .config import Credentials, load_credentials, load_debug_flag
from .errors import ApiError, NetworkError
from .responses import BaseResponse, dispatch_response
from .transport import RequestsHttpClient


class NewebPayLogistics:
    """
    蓝新物流 API 客户端。

    debug=True 使用测试环境 ccore.newebpay.com，否则使用正式环境。
    """

    def __init__(
        self,
        merchant_id: str,
        hash_key: str,
        hash_iv: str,
        debug: bool = True,
        http_client=None,
    ):
        self.credentials = Credentials(
            merchant_id=merchant_id,
            hash_key=hash_key,
            hash_iv=hash_iv,
        )
        self.debug = debug
        self.http_client = http_client or RequestsHttpClient()

    @classmethod
    def from_env(cls, http_client=None):
        """从环境变量 / .env 读取 NEWEBPAY_MERCHANT_ID、NEWEBPAY_HASH_KEY、NEWEBPAY_HASH_IV"""
        credentials = load_credentials()
        return cls(
            merchant_id=credentials.merchant_id,
            hash_key=credentials.hash_key,
            hash_iv=credentials.hash_iv,
            debug=load_debug_flag(),
            http_client=http_client,
        )

    def map(self) -> MapRequest:
        return MapRequest(self.credentials, debug=self.debug)

    def create_order(self) -> CreateOrderRequest:
        return CreateOrderRequest(self.credentials, debug=self.debug)

    def query_order(self) -> QueryOrderRequest:
        return QueryOrderRequest(self.credentials, debug=self.debug)

    def print_order(self) -> PrintOrderRequest:
        return PrintOrderRequest(self.credentials, debug=self.debug)

    def send(self, request: BaseRequest) -> BaseResponse:
        url = request.get_url()
        form = request.get_payload().to_form()
        logger.debug({"msg": "请求完整内容", "接口地址": url, "表单": dict(form)})
        try:
            response = self.http_client.post(url, form)
        except Exception as e:
            # 自定义 http_client 可能抛出任意异常，统一视为网络错误
            logger.error({"msg": "网络请求失败", "接口地址": url, "错误": str(e)})
            raise NetworkError("Network request failed", e) from e
        return self.response(request, response)

    def response(self, request: BaseRequest, response: requests.Response) -> BaseResponse:
        status_code = response.status_code
        try:
            text = response.text
        except Exception as e:
            logger.error({"msg": "读取响应体失败", "状态码": status_code, "错误": str(e)})
            raise NetworkError("Failed to read response body", e) from e
        if not 200 <= status_code < 300:
            logger.error(
                {
                    "msg": "请求失败",
                    "状态码": status_code,
                    "响应头": dict(response.headers),
                    "响应体": text,
                }
            )
            raise ApiError(
                f"HTTP error! status: {status_code}", status=str(status_code), data=text
            )
        logger.debug({"msg": "响应信息", "状态码": status_code, "响应体": text})
        return dispatch_response(request.kind, text, status_code)
