"""Known-good South African ID numbers used across the test suite."""

from __future__ import annotations

# 2020-01-01 (with a 2024 clock), gender code 4800, SA citizen
FEMALE_CITIZEN_ID = "2001014800086"
# 1980-01-01, gender code 5009, SA citizen
MALE_CITIZEN_ID = "8001015009087"
# 1980-01-01, gender code 5009, permanent resident
MALE_RESIDENT_ID = "8001015009186"
# 1980-01-01, gender code 5009, citizenship digit 2
MALE_UNKNOWN_ID = "8001015009285"
