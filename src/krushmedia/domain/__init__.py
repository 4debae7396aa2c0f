"""Domain rules: param extraction, endpoint templates, status policy, media types."""

from .endpoint import EndpointParams, EndpointTemplate
from .extension import parse_impression_ext
from .media_type import get_media_type_for_imp
from .status_policy import (
    STATUS_RULES,
    Disposition,
    StatusOutcome,
    StatusRule,
    classify_status,
)

__all__ = [
    "Disposition",
    "EndpointParams",
    "EndpointTemplate",
    "STATUS_RULES",
    "StatusOutcome",
    "StatusRule",
    "classify_status",
    "get_media_type_for_imp",
    "parse_impression_ext",
]
