"""Endpoint URL templates.

Templates use Go-style field actions, e.g.
``http://ads4.krushmedia.com/?c=rtb&m=req&key={{.AccountID}}``.
A template is compiled once at construction and is immutable afterwards,
so a single instance is shared by every auction round.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple

from ..errors import BadInputError, ConfigurationError

_ACTION_RE = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)
_FIELD_RE = re.compile(r"^\s*\.([A-Za-z_][A-Za-z0-9_]*)\s*$")


@dataclass(frozen=True)
class EndpointParams:
    """Values available to endpoint templates, keyed by macro name."""

    host: str = ""
    publisher_id: str = ""
    zone_id: str = ""
    source_id: str = ""
    account_id: str = ""
    ad_unit: str = ""

    def macros(self) -> dict[str, str]:
        return {
            "Host": self.host,
            "PublisherID": self.publisher_id,
            "ZoneID": self.zone_id,
            "SourceId": self.source_id,
            "AccountID": self.account_id,
            "AdUnit": self.ad_unit,
        }


class _Segment(NamedTuple):
    text: str
    is_macro: bool


@dataclass(frozen=True)
class EndpointTemplate:
    """A compiled endpoint template."""

    source: str
    segments: tuple[_Segment, ...]

    @classmethod
    def compile(cls, text: str) -> EndpointTemplate:
        """Parse *text* into literal and macro segments.

        Raises:
            ConfigurationError: empty template, unterminated ``{{`` or an
                action that is not a plain ``.Field`` reference.
        """
        if not text or not text.strip():
            raise ConfigurationError("endpoint template is empty")

        segments: list[_Segment] = []
        pos = 0
        for match in _ACTION_RE.finditer(text):
            literal = text[pos:match.start()]
            _check_literal(literal, text)
            if literal:
                segments.append(_Segment(literal, False))
            field = _FIELD_RE.match(match.group(1))
            if field is None:
                raise ConfigurationError(
                    f"unsupported action {match.group(0)!r} in endpoint template {text!r}"
                )
            segments.append(_Segment(field.group(1), True))
            pos = match.end()

        tail = text[pos:]
        _check_literal(tail, text)
        if tail:
            segments.append(_Segment(tail, False))
        return cls(source=text, segments=tuple(segments))

    @property
    def macro_names(self) -> list[str]:
        return [s.text for s in self.segments if s.is_macro]

    def resolve(self, params: EndpointParams) -> str:
        """Render the URL. Values are substituted verbatim.

        Raises:
            BadInputError: the template references a macro that does not exist.
        """
        values = params.macros()
        parts: list[str] = []
        for segment in self.segments:
            if not segment.is_macro:
                parts.append(segment.text)
                continue
            if segment.text not in values:
                raise BadInputError(
                    f"endpoint template references unknown macro {segment.text!r}"
                )
            parts.append(values[segment.text])
        return "".join(parts)


def _check_literal(literal: str, text: str) -> None:
    if "{{" in literal:
        raise ConfigurationError(f"unterminated action in endpoint template {text!r}")
