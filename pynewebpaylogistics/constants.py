from enum import Enum


TEST_HOST = "https://ccore.newebpay.com/API/Logistic"
PROD_HOST = "https://core.newebpay.com/API/Logistic"

USER_AGENT = "NewebPay-Logistics-Python-SDK"


class RequestKind(str, Enum):
    """请求类型，决定校验规则、接口路径以及响应解析方式"""

    MAP = "map"
    CREATE = "create"
    QUERY = "query"
    PRINT = "print"


REQUEST_PATHS = {
    RequestKind.MAP: "/map",
    RequestKind.CREATE: "/create",
    RequestKind.QUERY: "/query",
    RequestKind.PRINT: "/print",
}


class LgsType(str, Enum):
    B2C = "B2C"
    C2C = "C2C"


class ShipType(str, Enum):
    SEVEN_ELEVEN = "7-11"
    FAMILY = "FAMIC2C"
    HILIFE = "HILIFEC2C"
    OK = "OKMARTC2C"


class TradeType(str, Enum):
    PAYMENT = "1"  # 取货付款
    NON_PAYMENT = "3"  # 取货不付款


class RespondType(str, Enum):
    JSON = "JSON"
    HTML = "HTML"
    STRING = "String"


class Version(str, Enum):
    V_1_0 = "1.0"
