import pytest

from pynewebpaylogistics.constants import RequestKind
from pynewebpaylogistics.errors import ApiError, ParseError
from pynewebpaylogistics.responses import (
    BaseResponse,
    CreateOrderResponse,
    PrintOrderResponse,
    QueryOrderResponse,
    dispatch_response,
)

HTML = "<html><body>Print content</body></html>"


def test_generic_kind_returns_structured_response():
    response = dispatch_response(RequestKind.MAP, '{"Status":"SUCCESS","Message":"ok"}', 200)
    assert type(response) is BaseResponse
    assert not response.is_opaque
    assert response.is_success()
    assert response.get_message() == "ok"
    assert response.get_data() == {"Status": "SUCCESS", "Message": "ok"}


def test_create_order_response():
    body = '{"Status":"SUCCESS","Message":"Order created","Result":{"TradeNo":"TRADE123"}}'
    response = dispatch_response(RequestKind.CREATE, body, 200)
    assert isinstance(response, CreateOrderResponse)
    assert response.get_trade_no() == "TRADE123"


def test_query_order_response():
    body = '{"Status":"SUCCESS","Message":"","Result":{"LogisticsStatus":"SHIPPED"}}'
    response = dispatch_response(RequestKind.QUERY, body, 200)
    assert isinstance(response, QueryOrderResponse)
    assert response.get_logistics_status() == "SHIPPED"


def test_failed_status():
    response = dispatch_response(RequestKind.QUERY, '{"Status":"ERR01","Message":"bad"}', 200)
    assert not response.is_success()
    assert response.get_message() == "bad"
    assert response.get_logistics_status() is None


def test_print_html_is_opaque():
    response = dispatch_response(RequestKind.PRINT, HTML, 200)
    assert isinstance(response, PrintOrderResponse)
    assert response.is_opaque
    assert response.get_data() == HTML
    assert response.get_html_content() == HTML
    assert not response.is_success()


def test_print_json_response():
    response = dispatch_response(RequestKind.PRINT, '{"Status":"SUCCESS","Result":"<p>label</p>"}', 200)
    assert isinstance(response, PrintOrderResponse)
    assert not response.is_opaque
    assert response.get_html_content() == "<p>label</p>"


@pytest.mark.parametrize("kind", [RequestKind.MAP, RequestKind.CREATE, RequestKind.QUERY])
def test_non_json_for_generic_kind_raises(kind):
    with pytest.raises(ParseError) as excinfo:
        dispatch_response(kind, HTML, 200)
    assert isinstance(excinfo.value, ApiError)
    assert excinfo.value.status == "200"
    assert "JSON" in str(excinfo.value)
    assert excinfo.value.data == HTML


def test_nan_is_not_json():
    with pytest.raises(ParseError):
        dispatch_response(RequestKind.CREATE, "NaN", 200)


def test_kind_given_as_string():
    response = dispatch_response("print", HTML, 200)
    assert response.is_opaque
