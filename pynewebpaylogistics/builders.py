from collections import OrderedDict
from enum import Enum

from loguru import logger

from .constants import PROD_HOST, REQUEST_PATHS, TEST_HOST, RequestKind
from .generate_signature import SignedPayload, sign_fields
from .validator import ensure_valid


def _plain(value):
    if isinstance(value, Enum):
        return value.value
    return value


class BaseRequest:
    """
    所有物流请求的共用部分。字段按 set_xxx 的调用顺序加密，顺序即签名顺序。
    """

    kind: RequestKind

    def __init__(self, credentials, debug: bool = True):
        self.credentials = credentials
        self.debug = debug
        self.content = OrderedDict()

    def _set(self, name: str, value):
        self.content[name] = _plain(value)
        return self

    def set_merchant_trade_no(self, trade_no: str):
        return self._set("MerchantOrderNo", trade_no)

    def set_time_stamp(self, time_stamp: str | int):
        return self._set("TimeStamp", time_stamp)

    def get_fields(self) -> OrderedDict:
        return OrderedDict(self.content)

    def get_url(self) -> str:
        host = TEST_HOST if self.debug else PROD_HOST
        return f"{host}{REQUEST_PATHS[self.kind]}"

    def get_payload(self) -> SignedPayload:
        fields = self.get_fields()
        ensure_valid(self.kind, fields)
        logger.debug(
            {
                "msg": "请求信息",
                "请求类型": self.kind.value,
                "接口地址": self.get_url(),
                "请求体（加密前）": dict(fields),
            }
        )
        payload = sign_fields(fields, self.credentials)
        logger.debug(
            {
                "msg": "AES加密请求体",
                "PostData_": payload.ciphertext,
                "HashData_": payload.digest,
            }
        )
        return payload


class MapRequest(BaseRequest):
    """
    电子地图（选择取货门市）
    MerchantOrderNo	String(30)	商店订单编号	是
    LgsType	String(3)	物流类型	是	B2C / C2C
    ShipType	String(10)	超商类型	是
    ReturnURL	String(50)	选择门市后返回网址	是
    TimeStamp	String(50)	时间戳	是
    IsCollection	String(1)	是否代收货款	否	Y / N
    ServerReplyURL, ExtraData, LogisticsSubType, Device	否
    """

    kind = RequestKind.MAP

    def set_lgs_type(self, lgs_type):
        return self._set("LgsType", lgs_type)

    def set_ship_type(self, ship_type):
        return self._set("ShipType", ship_type)

    def set_return_url(self, url: str):
        return self._set("ReturnURL", url)

    def set_logistics_sub_type(self, sub_type: str):
        return self._set("LogisticsSubType", sub_type)

    def set_is_collection(self, is_collection: str):
        return self._set("IsCollection", is_collection)

    def set_server_reply_url(self, url: str):
        return self._set("ServerReplyURL", url)

    def set_extra_data(self, data: str):
        return self._set("ExtraData", data)

    def set_device(self, device: int):
        return self._set("Device", device)


class CreateOrderRequest(BaseRequest):
    """
    建立物流订单
    MerchantOrderNo	String(30)	商店订单编号	是
    TradeType	Int(1)	交易类型	是	1：取货付款 3：取货不付款
    UserName	String(20)	寄件人姓名	是
    UserEmail	String(50)	寄件人 Email	是
    Amt	Int(5)	订单金额	是	正整数
    LgsType, ShipType, TimeStamp	是
    UserTel, StoreID, Receiver*, LogisticsSubType	否
    """

    kind = RequestKind.CREATE

    def set_trade_type(self, trade_type):
        return self._set("TradeType", trade_type)

    def set_user_name(self, name: str):
        return self._set("UserName", name)

    def set_user_tel(self, tel: str):
        return self._set("UserTel", tel)

    def set_user_email(self, email: str):
        return self._set("UserEmail", email)

    def set_store_id(self, store_id: str):
        return self._set("StoreID", store_id)

    def set_amt(self, amt: int):
        return self._set("Amt", amt)

    def set_lgs_type(self, lgs_type):
        return self._set("LgsType", lgs_type)

    def set_ship_type(self, ship_type):
        return self._set("ShipType", ship_type)

    def set_receiver_name(self, name: str):
        return self._set("ReceiverName", name)

    def set_receiver_phone(self, phone: str):
        return self._set("ReceiverPhone", phone)

    def set_receiver_cell_phone(self, cell_phone: str):
        return self._set("ReceiverCellPhone", cell_phone)

    def set_receiver_email(self, email: str):
        return self._set("ReceiverEmail", email)

    def set_logistics_sub_type(self, sub_type: str):
        return self._set("LogisticsSubType", sub_type)


class QueryOrderRequest(BaseRequest):
    """查询物流订单"""

    kind = RequestKind.QUERY

    def set_logistics_id(self, logistics_id: str):
        return self._set("LogisticsID", logistics_id)


class PrintOrderRequest(BaseRequest):
    """列印托运单，蓝新直接返回 HTML"""

    kind = RequestKind.PRINT

    def set_logistics_id(self, logistics_id: str):
        return self._set("LogisticsID", logistics_id)
