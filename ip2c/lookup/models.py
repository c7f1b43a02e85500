"""
IP2C — Lookup result model.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CountryInfo:
    """Country resolved for an address."""
    two_letter_code: str    # ISO 3166-1 alpha-2, e.g. "CA"
    three_letter_code: str  # ISO 3166-1 alpha-3, e.g. "CAN"
    full_name: str

    def to_dict(self) -> dict:
        return {
            "two_letter_code": self.two_letter_code,
            "three_letter_code": self.three_letter_code,
            "full_name": self.full_name,
        }
