import pytest

from pynewebpaylogistics.constants import LgsType, RequestKind, ShipType, TradeType
from pynewebpaylogistics.errors import ValidationError
from pynewebpaylogistics.validator import ensure_valid, validate_fields


def create_order_fields(**overrides):
    fields = {
        "MerchantOrderNo": "ORDER123",
        "TradeType": TradeType.PAYMENT.value,
        "UserName": "Test User",
        "UserEmail": "test@example.com",
        "Amt": 100,
        "LgsType": LgsType.B2C.value,
        "ShipType": ShipType.SEVEN_ELEVEN.value,
        "TimeStamp": 1700000000,
    }
    fields.update(overrides)
    return fields


def fields_with(field, value):
    return validate_fields(RequestKind.CREATE, create_order_fields(**{field: value}))


def test_valid_create_order():
    assert validate_fields(RequestKind.CREATE, create_order_fields()) == []


def test_missing_required_fields_are_reported():
    violations = validate_fields(RequestKind.CREATE, {})
    reported = {v.split(":")[0] for v in violations}
    assert {"MerchantOrderNo", "TradeType", "UserName", "UserEmail", "Amt"} <= reported


@pytest.mark.parametrize(
    "field, value",
    [
        ("Amt", 0),
        ("Amt", -5),
        ("Amt", "100"),
        ("UserEmail", "not-an-email"),
        ("MerchantOrderNo", ""),
        ("LgsType", "X2Y"),
        ("TradeType", "2"),
        ("ReceiverEmail", "bad"),
    ],
)
def test_bad_create_order_values(field, value):
    violations = fields_with(field, value)
    assert violations
    assert all(v.startswith(f"{field}:") for v in violations)


def test_time_stamp_accepts_string_or_number():
    assert validate_fields(RequestKind.QUERY, {"MerchantOrderNo": "A", "TimeStamp": "1700000000"}) == []
    assert validate_fields(RequestKind.QUERY, {"MerchantOrderNo": "A", "TimeStamp": 1700000000}) == []
    assert validate_fields(RequestKind.QUERY, {"MerchantOrderNo": "A", "TimeStamp": 1.5}) == []
    assert validate_fields(RequestKind.QUERY, {"MerchantOrderNo": "A", "TimeStamp": None})
    assert validate_fields(RequestKind.QUERY, {"MerchantOrderNo": "A", "TimeStamp": float("nan")})


def test_map_request_rules():
    fields = {
        "MerchantOrderNo": "ORDER123",
        "LgsType": "C2C",
        "ShipType": "FAMIC2C",
        "ReturnURL": "https://example.com/return",
        "TimeStamp": "1700000000",
        "IsCollection": "Y",
    }
    assert validate_fields("map", fields) == []
    assert validate_fields("map", {**fields, "IsCollection": "maybe"})
    assert validate_fields("map", {**fields, "ReturnURL": "not a url"})
    assert validate_fields("map", {**fields, "ServerReplyURL": "ftp://example.com/reply"}) == []
    assert validate_fields("map", {**fields, "Device": 1.5}) == []
    assert validate_fields("map", {**fields, "Device": "1"})


def test_print_request_rules():
    assert validate_fields(RequestKind.PRINT, {"MerchantOrderNo": "A", "TimeStamp": 1, "LogisticsID": "L1"}) == []
    assert validate_fields(RequestKind.PRINT, {"TimeStamp": 1})


def test_validate_fields_does_not_mutate_input():
    fields = create_order_fields()
    snapshot = dict(fields)
    validate_fields(RequestKind.CREATE, fields)
    assert fields == snapshot


def test_ensure_valid_raises_with_violations():
    with pytest.raises(ValidationError) as excinfo:
        ensure_valid(RequestKind.CREATE, create_order_fields(Amt=0))
    assert excinfo.value.violations
    assert "Amt" in str(excinfo.value)
