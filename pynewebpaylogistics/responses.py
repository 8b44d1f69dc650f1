import json

from loguru import logger

from .constants import RequestKind
from .errors import ParseError


class BaseResponse:
    def __init__(self, data, opaque: bool = False):
        self.data = data
        self.is_opaque = opaque

    def get_data(self):
        return self.data

    def is_success(self) -> bool:
        return isinstance(self.data, dict) and self.data.get("Status") == "SUCCESS"

    def get_message(self) -> str:
        if isinstance(self.data, dict):
            return self.data.get("Message") or ""
        return ""

    def get_result(self) -> dict:
        if isinstance(self.data, dict) and isinstance(self.data.get("Result"), dict):
            return self.data["Result"]
        return {}


class CreateOrderResponse(BaseResponse):
    def get_trade_no(self) -> str | None:
        return self.get_result().get("TradeNo")


class QueryOrderResponse(BaseResponse):
    def get_logistics_status(self) -> str | None:
        return self.get_result().get("LogisticsStatus")


class PrintOrderResponse(BaseResponse):
    def get_html_content(self) -> str:
        """列印请求通常直接返回 HTML，也可能是放在 Result 里的 JSON"""
        if self.is_opaque or isinstance(self.data, str):
            return self.data
        if isinstance(self.data, dict):
            return self.data.get("Result") or ""
        return ""


def _reject_constant(name):
    raise ValueError(f"invalid JSON constant: {name}")


RESPONSE_TYPES = {
    RequestKind.MAP: BaseResponse,
    RequestKind.CREATE: CreateOrderResponse,
    RequestKind.QUERY: QueryOrderResponse,
    RequestKind.PRINT: PrintOrderResponse,
}


def dispatch_response(kind: RequestKind, text: str, status_code: int) -> BaseResponse:
    """
    先尝试按 JSON 解析；失败时只有列印请求把原文当作 HTML 返回，其余类型抛 ParseError。
    """
    kind = RequestKind(kind)
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        if kind is RequestKind.PRINT:
            logger.debug({"msg": "列印响应为 HTML", "长度": len(text)})
            return PrintOrderResponse(text, opaque=True)
        logger.error(
            {
                "msg": "响应解析失败",
                "请求类型": kind.value,
                "状态码": status_code,
                "响应体": text,
            }
        )
        raise ParseError(
            f"无法解析响应为 JSON: {e}", status=str(status_code), data=text
        ) from e
    return RESPONSE_TYPES[kind](data)
