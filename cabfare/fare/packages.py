"""Hourly package identifiers for local trips.

Booking forms, the admin screens and the PHP API all spell package ids a
little differently. ``normalize_package_id`` folds those spellings onto the
three canonical ids; the local fare strategy itself only honours the exact
spellings listed in ``HR8KM80_PACKAGE_IDS`` and ``HR10KM100_PACKAGE_IDS``.
"""

import logging

logger = logging.getLogger(__name__)

PACKAGE_4HR_40KM = "4hrs-40km"
PACKAGE_8HR_80KM = "8hrs-80km"
PACKAGE_10HR_100KM = "10hrs-100km"

HR8KM80_PACKAGE_IDS = frozenset({PACKAGE_8HR_80KM, "8hr_80km"})
HR10KM100_PACKAGE_IDS = frozenset({PACKAGE_10HR_100KM, "10hr_100km"})

_STANDARD_PACKAGE_IDS: dict[str, str] = {
    "4hr_40km": PACKAGE_4HR_40KM,
    "04hr_40km": PACKAGE_4HR_40KM,
    "04hrs_40km": PACKAGE_4HR_40KM,
    "4hrs_40km": PACKAGE_4HR_40KM,
    "4hours_40km": PACKAGE_4HR_40KM,
    "8hr_80km": PACKAGE_8HR_80KM,
    "8hrs_80km": PACKAGE_8HR_80KM,
    "8hours_80km": PACKAGE_8HR_80KM,
    "10hr_100km": PACKAGE_10HR_100KM,
    "10hrs_100km": PACKAGE_10HR_100KM,
    "10hours_100km": PACKAGE_10HR_100KM,
}

_DISPLAY_NAMES: dict[str, str] = {
    PACKAGE_4HR_40KM: "4 Hours / 40 KM",
    PACKAGE_8HR_80KM: "8 Hours / 80 KM",
    PACKAGE_10HR_100KM: "10 Hours / 100 KM",
}

STANDARD_HOURLY_PACKAGES: list[dict[str, str]] = [
    {"value": package_id, "label": label} for package_id, label in _DISPLAY_NAMES.items()
]


def _mentions_duration(package_id: str, km_marker: str) -> bool:
    return "hr" in package_id or "hour" in package_id or km_marker in package_id


def normalize_package_id(package_id: str | None) -> str:
    """Map any known spelling of an hourly package onto its canonical id.

    Absent or unrecognised ids fall back to the 8hr/80km package.
    """
    if not package_id:
        return PACKAGE_8HR_80KM

    table_key = package_id.replace("hrs-", "hr_").replace("hr-", "hr_")
    if table_key in _STANDARD_PACKAGE_IDS:
        return _STANDARD_PACKAGE_IDS[table_key]

    lowered = package_id.lower()
    # 10 before 8 before 4: "10hrs-100km" also contains "100" and "0".
    if "10" in lowered and _mentions_duration(lowered, "100"):
        return PACKAGE_10HR_100KM
    if "8" in lowered and _mentions_duration(lowered, "80"):
        return PACKAGE_8HR_80KM
    if "4" in lowered and _mentions_duration(lowered, "40"):
        return PACKAGE_4HR_40KM

    logger.debug(f"Unrecognised package id {package_id!r}, using {PACKAGE_8HR_80KM}")
    return PACKAGE_8HR_80KM


def get_package_display_name(package_id: str) -> str:
    normalized = normalize_package_id(package_id)
    if normalized in _DISPLAY_NAMES:
        return _DISPLAY_NAMES[normalized]
    return package_id.replace("-", " ").replace("_", " ")
