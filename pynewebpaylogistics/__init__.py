from .base import NewebPayLogistics
from .builders import (
    BaseRequest,
    CreateOrderRequest,
    MapRequest,
    PrintOrderRequest,
    QueryOrderRequest,
)
from .config import Credentials
from .constants import LgsType, RequestKind, RespondType, ShipType, TradeType, Version
from .errors import (
    ApiError,
    DecryptError,
    NetworkError,
    NewebPayError,
    ParseError,
    ValidationError,
)
from .form_builder import FormBuilder
from .responses import (
    BaseResponse,
    CreateOrderResponse,
    PrintOrderResponse,
    QueryOrderResponse,
    dispatch_response,
)

__all__ = [
    "NewebPayLogistics",
    "BaseRequest",
    "MapRequest",
    "CreateOrderRequest",
    "QueryOrderRequest",
    "PrintOrderRequest",
    "Credentials",
    "LgsType",
    "RequestKind",
    "RespondType",
    "ShipType",
    "TradeType",
    "Version",
    "NewebPayError",
    "ValidationError",
    "NetworkError",
    "ApiError",
    "ParseError",
    "DecryptError",
    "FormBuilder",
    "BaseResponse",
    "CreateOrderResponse",
    "QueryOrderResponse",
    "PrintOrderResponse",
    "dispatch_response",
]
