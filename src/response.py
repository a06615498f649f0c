"""Decoding of HoYoLAB check-in responses.

Both the info (status-check) and sign (claim) endpoints answer with the same
envelope::

    {"retcode": 0, "message": "OK", "data": {"is_sign": true, ...}}

The service omits fields on some error responses, so a missing ``retcode``
means 0 and a missing ``data``/``is_sign`` means "not signed". Fields that are
present but of the wrong type are rejected as a decoding error.
"""

from dataclasses import dataclass
from typing import Any, Optional

import requests


ALREADY_SIGNED_RETCODE = -5003


class TransportError(Exception):
    """The request failed or the body was not the expected JSON envelope."""


class RemoteError(Exception):
    """The service answered with a nonzero return code."""

    def __init__(self, retcode: int, message: Optional[str] = None):
        self.retcode = retcode
        self.message = message
        super().__init__(message or f"Return code is {retcode}")


@dataclass
class CheckinResponse:
    retcode: int = 0
    message: Optional[str] = None
    is_sign: bool = False


def read_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        text = response.text[:200] if response.text else ""
        raise TransportError(f"non-json (HTTP {response.status_code}): {text or e}")


def decode(payload: Any) -> CheckinResponse:
    if not isinstance(payload, dict):
        raise TransportError(f"unexpected response: {type(payload).__name__}")

    raw_code = payload.get("retcode")
    if raw_code is None:
        retcode = 0
    elif isinstance(raw_code, int) and not isinstance(raw_code, bool):
        retcode = raw_code
    else:
        raise TransportError(f"unexpected retcode: {raw_code!r}")

    message = payload.get("message")
    message = str(message) if message not in (None, "") else None

    data = payload.get("data")
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise TransportError(f"unexpected data: {type(data).__name__}")

    is_sign = data.get("is_sign", False)
    if is_sign is None:
        is_sign = False
    if not isinstance(is_sign, bool):
        raise TransportError(f"unexpected is_sign: {is_sign!r}")

    return CheckinResponse(retcode=retcode, message=message, is_sign=is_sign)


def decode_status(payload: Any) -> CheckinResponse:
    res = decode(payload)
    if res.retcode != 0:
        raise RemoteError(res.retcode, res.message)
    return res


def decode_claim(payload: Any, already_signed_retcode: int = ALREADY_SIGNED_RETCODE) -> CheckinResponse:
    # The sign endpoint answers already_signed_retcode when today's reward was claimed before.
    res = decode(payload)
    if res.retcode != 0 and res.retcode != already_signed_retcode:
        raise RemoteError(res.retcode, res.message)
    return res
