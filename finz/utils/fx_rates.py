from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

# Fixed quotes: source -> target -> rate. Cross-rates are not inverses of
# each other (EUR->USD 1.09 but USD->EUR 0.92).
_RAW_RATES: Dict[str, Dict[str, float]] = {
    "EUR": {"USD": 1.09, "GBP": 0.85, "JPY": 160.0},
    "USD": {"EUR": 0.92, "GBP": 0.78, "JPY": 147.0},
    "GBP": {"EUR": 1.18, "USD": 1.28, "JPY": 188.0},
    "JPY": {"EUR": 0.00625, "USD": 0.0068, "GBP": 0.0053},
}

RATES: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {src: MappingProxyType(dict(targets)) for src, targets in _RAW_RATES.items()}
)


def supported_currencies() -> list[str]:
    return sorted(RATES.keys())
