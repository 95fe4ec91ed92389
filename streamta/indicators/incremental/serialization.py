"""
Byte-level state persistence for incremental indicators.

Encoded layout (UTF-8 JSON):
    {"type": "hhv", "version": 1, "state": {...to_dict() output...}}

Floats are written with Python's shortest round-trip repr, so a decoded
instance continues bit-identically. Sentinels and NaN use the JSON
extensions (Infinity, -Infinity, NaN) that the json module reads back.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ...config.constants import STATE_ENCODING, STATE_FORMAT_VERSION
from ...errors import (
    DataItemIncompleteError,
    DataItemInvalidError,
    InvalidParameterError,
)
from .base import IncrementalIndicator
from .factory import indicator_class_for, indicator_type_of

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("type", "state")


def state_to_payload(indicator: IncrementalIndicator) -> dict[str, Any]:
    """Wrap an indicator's state in the versioned envelope."""
    return {
        "type": indicator_type_of(indicator),
        "version": STATE_FORMAT_VERSION,
        "state": indicator.to_dict(),
    }


def encode_state(indicator: IncrementalIndicator) -> bytes:
    """Serialize an indicator's state to bytes."""
    payload = state_to_payload(indicator)
    return json.dumps(payload, separators=(",", ":")).encode(STATE_ENCODING)


def payload_to_indicator(data: Any) -> IncrementalIndicator:
    """
    Rebuild an indicator from a decoded envelope dict.

    Raises:
        DataItemIncompleteError: If required fields are missing.
        DataItemInvalidError: If fields are present but unusable.
    """
    if not isinstance(data, dict):
        raise DataItemInvalidError(
            f"state payload must be an object, got {type(data).__name__}"
        )

    missing = [key for key in _REQUIRED_KEYS if key not in data]
    if missing:
        raise DataItemIncompleteError(f"state payload missing {missing}")

    version = data.get("version", STATE_FORMAT_VERSION)
    # bool is an int subclass; true must not pass as version 1
    if type(version) is not int or version != STATE_FORMAT_VERSION:
        raise DataItemInvalidError(
            f"unsupported state version {version!r} (expected {STATE_FORMAT_VERSION})"
        )

    try:
        cls = indicator_class_for(str(data["type"]))
    except KeyError as e:
        raise DataItemInvalidError(e.args[0]) from e

    state = data["state"]
    if not isinstance(state, dict):
        raise DataItemInvalidError(
            f"'state' must be an object, got {type(state).__name__}"
        )

    try:
        indicator = cls.from_dict(state)
    except KeyError as e:
        raise DataItemIncompleteError(
            f"{cls.__name__} state missing field {e.args[0]!r}"
        ) from e
    except InvalidParameterError as e:
        raise DataItemInvalidError(f"{cls.__name__} state rejected: {e.detail}") from e
    except (TypeError, ValueError) as e:
        raise DataItemInvalidError(f"{cls.__name__} state malformed: {e}") from e

    logger.debug("restored %s from persisted state", data["type"])
    return indicator


def decode_state(payload: bytes | str) -> IncrementalIndicator:
    """
    Deserialize bytes produced by encode_state().

    Raises:
        DataItemIncompleteError: If required fields are missing.
        DataItemInvalidError: If the payload is not valid encoded state.
    """
    try:
        data = json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DataItemInvalidError(f"state payload is not valid JSON: {e}") from e
    return payload_to_indicator(data)
