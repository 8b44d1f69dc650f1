"""
测试环境手动联调，凭证从 .env 读取：
NEWEBPAY_MERCHANT_ID / NEWEBPAY_HASH_KEY / NEWEBPAY_HASH_IV / NEWEBPAY_DEBUG
"""

from random import randint
import time

from loguru import logger

from pynewebpaylogistics import (
    FormBuilder,
    LgsType,
    NewebPayLogistics,
    ShipType,
    TradeType,
)


def get_order_no():
    return f"LGS{randint(100000, 999999)}"


def get_time_stamp():
    return int(time.time())


def testcase1():
    """
    电子地图：生成自动提交表单，浏览器打开后选择门市
    """
    client = NewebPayLogistics.from_env()
    request = (
        client.map()
        .set_merchant_trade_no(get_order_no())
        .set_lgs_type(LgsType.C2C)
        .set_ship_type(ShipType.SEVEN_ELEVEN)
        .set_return_url("https://example.com/newebpay/return")
        .set_time_stamp(get_time_stamp())
    )
    html = FormBuilder().build(request)
    logger.info({"msg": "电子地图表单", "html": html})


def testcase2():
    """
    建立物流订单（取货付款）
    """
    client = NewebPayLogistics.from_env()
    request = (
        client.create_order()
        .set_merchant_trade_no(get_order_no())
        .set_trade_type(TradeType.PAYMENT)
        .set_user_name("测试寄件人")
        .set_user_tel("0912345678")
        .set_user_email("test@example.com")
        .set_store_id("131386")
        .set_amt(100)
        .set_lgs_type(LgsType.C2C)
        .set_ship_type(ShipType.SEVEN_ELEVEN)
        .set_time_stamp(get_time_stamp())
    )
    response = client.send(request)
    logger.info({"msg": "建立订单", "成功": response.is_success(), "响应": response.get_data()})


def testcase3(merchant_order_no: str):
    """
    查询物流订单
    """
    client = NewebPayLogistics.from_env()
    request = (
        client.query_order()
        .set_merchant_trade_no(merchant_order_no)
        .set_time_stamp(get_time_stamp())
    )
    response = client.send(request)
    logger.info({"msg": "查询订单", "物流状态": response.get_logistics_status()})


def testcase4(merchant_order_no: str, logistics_id: str):
    """
    列印托运单
    """
    client = NewebPayLogistics.from_env()
    request = (
        client.print_order()
        .set_merchant_trade_no(merchant_order_no)
        .set_time_stamp(get_time_stamp())
        .set_logistics_id(logistics_id)
    )
    response = client.send(request)
    logger.info({"msg": "列印托运单", "html": response.get_html_content()})


if __name__ == "__main__":
    testcase1()
    # testcase2()
    # testcase3("LGS123456")
    # testcase4("LGS123456", "L000001")
