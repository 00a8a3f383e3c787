"""Diagnostics package.

- round_trip: stdlib only, random AD -> BS -> AD checks
- year_lengths: needs the diagnostics extras (numpy, matplotlib for --out)
"""

__all__ = ["round_trip", "year_lengths"]
