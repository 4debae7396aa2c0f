"""KrushmediaBidder.make_bids: status policy, body decode, typed bids."""

import json

import pytest

from krushmedia.errors import BadInputError, BadServerResponseError
from krushmedia.models import BidRequest, BidType, RequestData, ResponseData
from krushmedia.observability import metrics_snapshot, reset_metrics
from krushmedia.services.bidder import KrushmediaBidder

ENDPOINT = "http://ads4.krushmedia.com/?c=rtb&m=req&key={{.AccountID}}"

REQUEST = BidRequest.model_validate(
    {
        "id": "req-1",
        "imp": [
            {"id": "imp1", "video": {"mimes": ["video/mp4"]}, "ext": {"bidder": {"key": "a"}}},
            {"id": "imp2", "banner": {"w": 300, "h": 250}, "ext": {"bidder": {"key": "a"}}},
            {"id": "imp3", "native": {"request": "{}"}, "ext": {"bidder": {"key": "a"}}},
        ],
    }
)
REQUEST_DATA = RequestData(uri="http://ads4.krushmedia.com/?c=rtb&m=req&key=a")


def _bid(bid_id: str, imp_id: str, price: float = 1.0) -> dict:
    return {"id": bid_id, "impid": imp_id, "price": price, "adm": "<div/>", "crid": "cr-" + bid_id}


def _response(status: int, body=b"") -> ResponseData:
    if isinstance(body, dict):
        body = json.dumps(body).encode("utf-8")
    return ResponseData(status_code=status, body=body)


def _make_bids(response: ResponseData):
    return KrushmediaBidder.from_template(ENDPOINT).make_bids(REQUEST, REQUEST_DATA, response)


@pytest.fixture(autouse=True)
def _clean_metrics():
    reset_metrics()
    yield
    reset_metrics()


# ---------------------------------------------------------------------------
# Status codes
# ---------------------------------------------------------------------------


class TestStatusCodes:
    def test_no_content(self):
        bids, errors = _make_bids(_response(204))
        assert bids is None
        assert errors == []

    def test_bad_request(self):
        bids, errors = _make_bids(_response(400))
        assert bids is None
        assert len(errors) == 1
        assert isinstance(errors[0], BadInputError)
        assert "400" in errors[0].message

    def test_service_unavailable_is_empty_success(self):
        bids, errors = _make_bids(_response(503, b"upstream busy"))
        assert bids is None
        assert errors == []

    @pytest.mark.parametrize("status", [404, 500])
    def test_unexpected_status(self, status):
        bids, errors = _make_bids(_response(status))
        assert bids is None
        assert len(errors) == 1
        assert isinstance(errors[0], BadServerResponseError)
        assert str(status) in errors[0].message


# ---------------------------------------------------------------------------
# Body decode
# ---------------------------------------------------------------------------


class TestBody:
    def test_two_bids_typed_by_imp(self):
        body = {"id": "req-1", "seatbid": [{"seat": "krush", "bid": [_bid("b1", "imp1"), _bid("b2", "imp2")]}]}
        bids, errors = _make_bids(_response(200, body))
        assert errors == []
        assert [tb.bid_type for tb in bids.bids] == [BidType.video, BidType.banner]
        assert [tb.bid.id for tb in bids.bids] == ["b1", "b2"]
        assert bids.currency == "USD"

    def test_native_and_unknown_imp(self):
        body = {"id": "req-1", "seatbid": [{"bid": [_bid("b1", "imp3"), _bid("b2", "ghost")]}]}
        bids, errors = _make_bids(_response(200, body))
        assert errors == []
        assert [tb.bid_type for tb in bids.bids] == [BidType.native, BidType.banner]

    def test_only_first_seat_consumed(self):
        body = {
            "id": "req-1",
            "seatbid": [
                {"seat": "s1", "bid": [_bid("b1", "imp2")]},
                {"seat": "s2", "bid": [_bid("b2", "imp1"), _bid("b3", "imp1")]},
            ],
        }
        bids, _ = _make_bids(_response(200, body))
        assert [tb.bid.id for tb in bids.bids] == ["b1"]

    def test_bid_fields_preserved(self):
        body = {"id": "req-1", "seatbid": [{"bid": [_bid("b1", "imp2", price=2.5)]}]}
        bids, _ = _make_bids(_response(200, body))
        bid = bids.bids[0].bid
        assert bid.price == pytest.approx(2.5)
        assert bid.model_dump()["adm"] == "<div/>"

    def test_seat_with_no_bids(self):
        body = {"id": "req-1", "seatbid": [{"seat": "s1", "bid": []}]}
        bids, errors = _make_bids(_response(200, body))
        assert errors == []
        assert bids.bids == []

    def test_response_without_id(self):
        body = {"seatbid": [{"bid": [_bid("b1", "imp1")]}]}
        bids, errors = _make_bids(_response(200, body))
        assert errors == []
        assert [tb.bid_type for tb in bids.bids] == [BidType.video]

    def test_bid_without_id_or_price(self):
        body = {"id": "req-1", "seatbid": [{"bid": [{"impid": "imp1", "crid": "c"}]}]}
        bids, errors = _make_bids(_response(200, body))
        assert errors == []
        bid = bids.bids[0].bid
        assert bid.id is None
        assert bid.price is None
        assert bids.bids[0].bid_type is BidType.video

    def test_bid_without_impid_is_bad_response(self):
        body = {"id": "req-1", "seatbid": [{"bid": [{"id": "b1", "price": 1.0}]}]}
        bids, errors = _make_bids(_response(200, body))
        assert bids is None
        assert errors == [BadServerResponseError("Bad Server Response")]

    @pytest.mark.parametrize("body", [b"", b"not json", b"[]"])
    def test_undecodable_body(self, body):
        bids, errors = _make_bids(_response(200, body))
        assert bids is None
        assert errors == [BadServerResponseError("Bad Server Response")]

    @pytest.mark.parametrize(
        "body", [{"id": "req-1", "seatbid": []}, {"seatbid": []}, {}]
    )
    def test_empty_seatbid(self, body):
        bids, errors = _make_bids(_response(200, body))
        assert bids is None
        assert errors == [BadServerResponseError("Empty SeatBid array")]


# ---------------------------------------------------------------------------
# Telemetry
# ---------------------------------------------------------------------------


class TestTelemetry:
    def test_dispositions_distinguish_empty_outcomes(self):
        _make_bids(_response(204))
        _make_bids(_response(503))
        _make_bids(_response(200, {"id": "req-1", "seatbid": [{"bid": []}]}))
        snap = metrics_snapshot()
        assert snap["dispositions"] == {"no_content": 1, "unavailable": 1, "ok": 1}
        assert snap["calls"]["make_bids"] == 3
        assert "make_bids" not in snap["errors"]

    def test_errors_counted(self):
        _make_bids(_response(400))
        _make_bids(_response(200, b"nope"))
        snap = metrics_snapshot()
        assert snap["errors"]["make_bids"] == 2
