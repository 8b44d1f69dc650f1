"""
各请求类型的字段校验规则。

规则以 pydantic 模型声明，validate_fields 只返回违规列表，不修改输入。
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from .constants import LgsType as LgsTypeEnum
from .constants import RequestKind
from .constants import ShipType as ShipTypeEnum
from .constants import TradeType as TradeTypeEnum
from .errors import ValidationError


NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]
Url = Annotated[StrictStr, Field(pattern=r"^[A-Za-z][A-Za-z0-9+.-]*:\S+$")]
Email = Annotated[StrictStr, Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")]
Number = Union[StrictInt, Annotated[StrictFloat, Field(allow_inf_nan=False)]]
TimeStampValue = Union[StrictStr, Number]


class MapRequestSchema(BaseModel):
    MerchantOrderNo: NonEmptyStr
    LgsType: LgsTypeEnum
    ShipType: ShipTypeEnum
    ReturnURL: Url
    TimeStamp: TimeStampValue
    LogisticsSubType: Optional[StrictStr] = None
    IsCollection: Optional[Literal["Y", "N"]] = None
    ServerReplyURL: Optional[Url] = None
    ExtraData: Optional[StrictStr] = None
    Device: Optional[Number] = None


class CreateOrderRequestSchema(BaseModel):
    MerchantOrderNo: NonEmptyStr
    TradeType: TradeTypeEnum
    UserName: NonEmptyStr
    UserTel: Optional[StrictStr] = None
    UserEmail: Email
    StoreID: Optional[StrictStr] = None
    Amt: Annotated[StrictInt, Field(gt=0)]
    LgsType: LgsTypeEnum
    ShipType: ShipTypeEnum
    TimeStamp: TimeStampValue
    ReceiverName: Optional[StrictStr] = None
    ReceiverPhone: Optional[StrictStr] = None
    ReceiverCellPhone: Optional[StrictStr] = None
    ReceiverEmail: Optional[Email] = None
    LogisticsSubType: Optional[StrictStr] = None


class QueryOrderRequestSchema(BaseModel):
    MerchantOrderNo: NonEmptyStr
    TimeStamp: TimeStampValue
    LogisticsID: Optional[StrictStr] = None


class PrintOrderRequestSchema(BaseModel):
    MerchantOrderNo: NonEmptyStr
    TimeStamp: TimeStampValue
    LogisticsID: Optional[StrictStr] = None


SCHEMAS = {
    RequestKind.MAP: MapRequestSchema,
    RequestKind.CREATE: CreateOrderRequestSchema,
    RequestKind.QUERY: QueryOrderRequestSchema,
    RequestKind.PRINT: PrintOrderRequestSchema,
}


def validate_fields(kind: RequestKind, fields: dict) -> list[str]:
    schema = SCHEMAS[RequestKind(kind)]
    try:
        schema.model_validate(dict(fields))
    except PydanticValidationError as e:
        violations = []
        for error in e.errors():
            # Union 字段的 loc 会带上分支名，只保留字段名
            field = error["loc"][0] if error["loc"] else "__root__"
            violations.append(f"{field}: {error['msg']}")
        return violations
    return []


def ensure_valid(kind: RequestKind, fields: dict):
    violations = validate_fields(kind, fields)
    if violations:
        raise ValidationError(
            f"{RequestKind(kind).value} 请求字段校验失败: " + "; ".join(violations),
            violations=violations,
        )
