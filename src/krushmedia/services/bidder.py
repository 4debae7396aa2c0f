"""KrushmediaBidder: per-round orchestration.

Two public methods, called by the host once per auction round:
``make_requests(request) -> (requests, errors)`` before the HTTP call and
``make_bids(request, request_data, response) -> (bidder_response, errors)``
after it. Errors are returned, not raised, so the host can aggregate them.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ..config.runtime import AdapterSettings
from ..domain.endpoint import EndpointParams, EndpointTemplate
from ..domain.extension import parse_impression_ext
from ..domain.media_type import get_media_type_for_imp
from ..domain.status_policy import classify_status
from ..errors import AdapterError, BadInputError, BadServerResponseError
from ..models.adapter import (
    BidderResponse,
    ExtraRequestInfo,
    RequestData,
    ResponseData,
    TypedBid,
)
from ..models.ext import ExtKrushmedia
from ..models.openrtb import BidRequest, BidResponse
from ..observability import log_adapter_call

MSG_MISSING_IMP = "Missing Imp Object"
MSG_BAD_SERVER_RESPONSE = "Bad Server Response"
MSG_EMPTY_SEATBID = "Empty SeatBid array"


def build_headers(request: BidRequest, openrtb_version: str = "2.5") -> dict[str, str]:
    """Fixed protocol headers plus whatever the device context provides."""
    headers = {
        "Content-Type": "application/json;charset=utf-8",
        "Accept": "application/json",
        "X-Openrtb-Version": openrtb_version,
    }
    device = request.device
    if device is not None:
        if device.ua:
            headers["User-Agent"] = device.ua
        if device.ip:
            headers["X-Forwarded-For"] = device.ip
        if device.language:
            headers["Accept-Language"] = device.language
        # 0 is a valid explicit value
        if device.dnt is not None:
            headers["Dnt"] = str(device.dnt)
    return headers


class KrushmediaBidder:
    """Translates OpenRTB rounds to and from the Krushmedia endpoint.

    Holds only the compiled endpoint template, which is read-only, so one
    instance can serve concurrent rounds. Each operation emits one
    ``adapter_call`` record on *logger*, or on ``krushmedia.adapter`` if omitted.
    """

    def __init__(
        self,
        endpoint: EndpointTemplate,
        openrtb_version: str = "2.5",
        logger: Any = None,
    ) -> None:
        self._endpoint = endpoint
        self._openrtb_version = openrtb_version
        self._logger = logger

    @classmethod
    def from_template(
        cls,
        template: str,
        openrtb_version: str = "2.5",
        logger: Any = None,
    ) -> KrushmediaBidder:
        """Compile *template* and build a bidder.

        Raises:
            ConfigurationError: the template does not compile.
        """
        return cls(EndpointTemplate.compile(template), openrtb_version, logger)

    @classmethod
    def from_settings(cls, settings: AdapterSettings, logger: Any = None) -> KrushmediaBidder:
        return cls.from_template(
            settings.krushmedia_endpoint,
            openrtb_version=settings.openrtb_version,
            logger=logger,
        )

    @property
    def endpoint(self) -> EndpointTemplate:
        return self._endpoint

    # ------------------------------------------------------------------
    # Request side
    # ------------------------------------------------------------------

    def make_requests(
        self,
        request: BidRequest,
        request_info: ExtraRequestInfo | None = None,
    ) -> tuple[list[RequestData], list[AdapterError]]:
        """Build the single outbound call for this round.

        Exactly one of the returned lists is non-empty. When impressions carry
        different account keys, the last impression's key picks the endpoint.
        """
        if not request.imp:
            return self._request_failed(BadInputError(MSG_MISSING_IMP))

        outbound = request.model_copy(deep=True)
        params: ExtKrushmedia | None = None
        for imp in outbound.imp:
            try:
                params = parse_impression_ext(imp)
            except BadInputError as exc:
                return self._request_failed(exc, imp_id=imp.id)
            imp.ext = None

        try:
            uri = self._endpoint.resolve(EndpointParams(account_id=params.account_id))
        except AdapterError as exc:
            return self._request_failed(exc)

        request_data = RequestData(
            method="POST",
            uri=uri,
            body=outbound.to_json(),
            headers=build_headers(outbound, self._openrtb_version),
        )
        log_adapter_call(
            "make_requests",
            logger=self._logger,
            extra={"request_id": request.id, "imp_count": len(request.imp), "uri": uri},
        )
        return [request_data], []

    def _request_failed(
        self, error: AdapterError, imp_id: str | None = None
    ) -> tuple[list[RequestData], list[AdapterError]]:
        log_adapter_call(
            "make_requests",
            error=error.message,
            extra={"imp_id": imp_id},
            logger=self._logger,
        )
        return [], [error]

    # ------------------------------------------------------------------
    # Response side
    # ------------------------------------------------------------------

    def make_bids(
        self,
        request: BidRequest,
        request_data: RequestData | None,
        response: ResponseData,
    ) -> tuple[BidderResponse | None, list[AdapterError]]:
        """Turn the endpoint's response into typed bids.

        204 and 503 yield ``(None, [])``: no bids and no error.
        """
        outcome = classify_status(response.status_code)
        disposition = outcome.disposition.value

        if outcome.error is not None:
            return self._bids_failed(outcome.error, disposition, response.status_code)
        if not outcome.has_body:
            log_adapter_call(
                "make_bids",
                logger=self._logger,
                disposition=disposition,
                extra={"status_code": response.status_code, "bid_count": 0},
            )
            return None, []

        try:
            bid_resp = BidResponse.model_validate_json(response.body)
        except ValidationError:
            return self._bids_failed(
                BadServerResponseError(MSG_BAD_SERVER_RESPONSE), disposition, response.status_code
            )
        if not bid_resp.seatbid:
            return self._bids_failed(
                BadServerResponseError(MSG_EMPTY_SEATBID), disposition, response.status_code
            )

        # Only the first seat is consumed.
        seat = bid_resp.seatbid[0]
        bidder_response = BidderResponse(
            bids=[
                TypedBid(bid=bid, bid_type=get_media_type_for_imp(bid.impid, request.imp))
                for bid in seat.bid
            ]
        )

        log_adapter_call(
            "make_bids",
            logger=self._logger,
            disposition=disposition,
            extra={"status_code": response.status_code, "bid_count": len(bidder_response.bids)},
        )
        return bidder_response, []

    def _bids_failed(
        self, error: AdapterError, disposition: str, status_code: int
    ) -> tuple[BidderResponse | None, list[AdapterError]]:
        log_adapter_call(
            "make_bids",
            logger=self._logger,
            disposition=disposition,
            error=error.message,
            extra={"status_code": status_code},
        )
        return None, [error]
