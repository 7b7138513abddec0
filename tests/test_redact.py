from __future__ import annotations

import pytest

from pytrashcan._redact import mask_address, redact_for_log


def test_redact_for_log_masks_network_identifiers() -> None:
    payload = {
        "name": "Kitchen bin",
        "ip": "192.168.1.20",
        "deviceInfo": {"mac": "AA:BB:CC:DD:EE:FF", "firmwareVersion": "1.0.0"},
        "ip_address": "10.0.0.1",
    }

    redacted = redact_for_log(payload)
    assert redacted["name"] == "Kitchen bin"
    assert redacted["ip"] == "*.*.*.20"
    assert redacted["ip_address"] == "*.*.*.1"
    assert redacted["deviceInfo"]["mac"] == "*:*:*:*:*:FF"
    assert redacted["deviceInfo"]["firmwareVersion"] == "1.0.0"
    assert payload["ip"] == "192.168.1.20"


def test_empty_identifiers_are_kept() -> None:
    assert redact_for_log({"ip": "", "mac": None}) == {"ip": "", "mac": None}


@pytest.mark.parametrize("payload", [True, "lid_opened", None, 42])
def test_scalar_payloads_pass_through(payload: object) -> None:
    assert redact_for_log(payload) == payload


def test_mask_address_without_separator() -> None:
    assert mask_address("kitchen-bin", ".") == "<redacted>"
