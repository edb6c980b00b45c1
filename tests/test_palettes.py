"""Mini README: Tests for colour palettes and hex decoding."""

from __future__ import annotations

import pytest

from bimshot.classification import attention_color, hex_to_rgb, status_color


def test_hex_to_rgb_decodes_bytes_over_255() -> None:
    assert hex_to_rgb("#ffffff") == (1.0, 1.0, 1.0)
    assert hex_to_rgb("#000000") == (0.0, 0.0, 0.0)
    assert hex_to_rgb("03AF51") == (3 / 255.0, 175 / 255.0, 81 / 255.0)


@pytest.mark.parametrize("value", ["not-a-color", "#fff", "#12345g", "", None, 42, "#ffffff00", " #ffffff"])
def test_hex_to_rgb_falls_back_to_mid_gray(value) -> None:
    assert hex_to_rgb(value) == (0.5, 0.5, 0.5)


def test_status_palette_entries() -> None:
    assert status_color("Curing") == (1.0, 1.0, 0.0)
    assert status_color("Transit") == (0.004, 0.686, 0.933)
    assert status_color("Early") == (0.012, 0.686, 0.318)
    assert status_color("On Time") == (0.5, 0.5, 0.5)
    assert status_color("Late") == (0.988, 0.016, 0.008)


def test_status_palette_hex_keys_are_literal_lookups() -> None:
    """The two hex-looking keys are not decoded as colours."""

    assert status_color("#03af51") == (0.988, 0.016, 0.008)
    assert status_color("#aaaaaa") == (0.012, 0.686, 0.318)


def test_status_palette_default_is_white() -> None:
    assert status_color("Somewhere else") == (1.0, 1.0, 1.0)
    assert status_color(None) == (1.0, 1.0, 1.0)


def test_attention_palette() -> None:
    assert attention_color("No Atendió") == (0.988, 0.016, 0.008)
    assert attention_color("Atención Total") == (0.012, 0.686, 0.318)
    assert attention_color("Parcial") == (0.012, 0.686, 0.318)
