import os

import pytest

from openwsdl.models import UNBOUNDED, SimpleKind, SimpleType, TypeAttribute
from openwsdl.parser import extract

EXAMPLES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "example_wsdls")


def load_example(filename: str) -> bytes:
    path = os.path.join(EXAMPLES_DIR, filename)
    if not os.path.exists(path):
        pytest.skip("Example file missing")
    with open(path, "rb") as f:
        return f.read()


def test_stock_quote_example():
    doc = extract(load_example("stock_quote.wsdl"))

    assert doc.name == "StockQuoteService"
    assert doc.target_namespace == "http://example.com/stockquote.wsdl"
    assert set(doc.types) == {"TradePriceRequest", "TradePrice"}
    assert doc.types["TradePriceRequest"].fields["tickerSymbol"].type == SimpleType(SimpleKind.STRING)
    assert doc.types["TradePrice"].fields["price"].type == SimpleType(SimpleKind.FLOAT)

    assert doc.messages["GetLastTradePriceInput"].part_element == "TradePriceRequest"
    assert doc.messages["GetLastTradePriceOutput"].part_element == "TradePrice"

    operation = doc.operations["GetLastTradePrice"]
    assert operation.input == "GetLastTradePriceInput"
    assert operation.output == "GetLastTradePriceOutput"
    assert operation.faults is None


def test_order_service_example():
    doc = extract(load_example("order_service.wsdl"))

    assert doc.name == "OrderService"
    assert set(doc.types) == {"Address", "OrderLine", "PlaceOrder", "PlaceOrderResponse", "OrderFault"}

    address = doc.types["Address"].fields
    assert address["postCode"].attribute == TypeAttribute(nillable=True)
    assert address["street"].attribute == TypeAttribute()

    line = doc.types["OrderLine"].fields
    assert line["sku"].attribute == TypeAttribute(nillable=False)
    assert line["quantity"].type == SimpleType(SimpleKind.INT)
    assert line["giftWrap"].attribute.nillable is True
    assert line["giftWrap"].type == SimpleType(SimpleKind.BOOLEAN)

    order = doc.types["PlaceOrder"].fields
    assert order["shipTo"].type == SimpleType(SimpleKind.COMPLEX, "Address")
    assert order["lines"].type == SimpleType(SimpleKind.COMPLEX, "OrderLine")
    assert order["lines"].attribute == TypeAttribute(min_occurs=1, max_occurs=UNBOUNDED)
    assert order["requestedAt"].attribute == TypeAttribute(min_occurs=0)
    assert order["requestedAt"].type == SimpleType(SimpleKind.DATE_TIME)

    place = doc.operations["PlaceOrder"]
    assert place.input == "PlaceOrderRequest"
    assert place.output == "PlaceOrderResponse"
    assert place.faults == ("OrderFaultMessage",)

    cancel = doc.operations["CancelOrder"]
    assert cancel.input == "PlaceOrderRequest"
    assert cancel.output is None
    assert cancel.faults is None


@pytest.mark.parametrize("filename", ["stock_quote.wsdl", "order_service.wsdl"])
def test_examples_extract_in_strict_mode(filename):
    data = load_example(filename)
    assert extract(data, strict=True) == extract(data)
