from __future__ import annotations

import math
import re

_SIZE_X_RE = re.compile(r"(\d)\s*[xх*×]\s*(\d)", re.IGNORECASE)
_SPACE_RE = re.compile(r"\s+")
_NUMBER_RE = re.compile(r"^[-+]?(?:\d+(?:\.\d*)?|\.\d+)$")


def normalize_name(text: str) -> str:
    normalized = text.strip().lower()
    normalized = _SIZE_X_RE.sub(r"\1x\2", normalized)
    normalized = _SPACE_RE.sub(" ", normalized)
    return normalized


def parse_decimal(token: str | None) -> float | None:
    if token is None:
        return None
    cleaned = token.strip()
    if not _NUMBER_RE.match(cleaned):
        return None
    value = float(cleaned)
    if not math.isfinite(value):
        return None
    return value


def format_number(value: float, places: int = 3) -> str:
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"


def _normalization_examples() -> list[tuple[str, str]]:
    return [
        ("Site  A", "site a"),
        ("10 x 20", "10x20"),
        ("Plate 8*30", "plate 8x30"),
    ]


if __name__ == "__main__":
    for raw, expected in _normalization_examples():
        got = normalize_name(raw)
        assert got == expected, f"{raw!r} -> {got!r}, expected {expected!r}"
