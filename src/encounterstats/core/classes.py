"""Class and spec catalogue.

Static display tables for the game's classes:
- CLASS_MAP: class id -> class name
- CLASS_SPEC_MAP: spec id -> spec name
- CLASS_COLORS: class name -> hex colour
- class_info: display mapping used by distribution views
"""

from __future__ import annotations

from encounterstats.models.domain import ClassInfo, ClassRole

UNKNOWN_SPEC = -1  # Sentinel for unmapped specs
FALLBACK_COLOR = "#8b5cf6"

CLASS_MAP: dict[int, str] = {
    1: "Stormblade",
    2: "Frost Mage",
    4: "Wind Knight",
    5: "Verdant Oracle",
    9: "Heavy Guardian",
    11: "Marksman",
    12: "Shield Knight",
    13: "Beat Performer",
}

CLASS_COLORS: dict[str, str] = {
    "Stormblade": "#674598",
    "Frost Mage": "#4de3d1",
    "Wind Knight": "#0099c6",
    "Verdant Oracle": "#66aa00",
    "Heavy Guardian": "#b38915",
    "Marksman": "#ffee00",
    "Shield Knight": "#7b9aa2",
    "Beat Performer": "#ee2e48",
}

CLASS_SPEC_MAP: dict[int, str] = {
    0: "Unknown",
    1: "Iaido",
    2: "Moonstrike",
    3: "Icicle",
    4: "Frostbeam",
    5: "Vanguard",
    6: "Skyward",
    7: "Smite",
    8: "Lifebind",
    9: "Earthfort",
    10: "Block",
    11: "Wildpack",
    12: "Falconry",
    13: "Recovery",
    14: "Shield",
    15: "Dissonance",
    16: "Concerto",
}

# Specs come in pairs per class: (1, 2) -> 1, (3, 4) -> 2, ...
_SPEC_PAIR_CLASS_IDS: tuple[int, ...] = (1, 2, 4, 5, 9, 11, 12, 13)

_SPEC_ROLES: dict[int, ClassRole] = {
    7: "damagehealer",
    15: "damagehealer",
    8: "healer",
    16: "healer",
    9: "tank",
    10: "tank",
    13: "tank",
    14: "tank",
}


def class_id_from_spec(spec_id: int) -> int | None:
    """Return the class id owning a spec, or None when unmapped."""
    if 1 <= spec_id <= 2 * len(_SPEC_PAIR_CLASS_IDS):
        return _SPEC_PAIR_CLASS_IDS[(spec_id - 1) // 2]
    return None


def class_info(class_spec: int) -> ClassInfo:
    """Resolve display name, class name, colour and role for a spec.

    Args:
        class_spec: Spec id (may be the -1 sentinel).

    Returns:
        ClassInfo; has_valid_mapping is False when the spec has no class.
    """
    class_id = class_id_from_spec(class_spec)
    class_name = CLASS_MAP.get(class_id, "") if class_id is not None else ""

    return ClassInfo(
        name=CLASS_SPEC_MAP.get(class_spec),
        class_name=class_name,
        color=CLASS_COLORS.get(class_name, FALLBACK_COLOR),
        has_valid_mapping=bool(class_id and class_name),
        role=class_role(class_spec),
    )


def class_role(class_spec: int) -> ClassRole:
    """Return the combat role of a spec. Unlisted specs count as damage."""
    return _SPEC_ROLES.get(class_spec, "damage")


def is_displayable_spec(class_spec: int) -> bool:
    """Whether a spec may appear in a distribution view."""
    # Spec 0 ("Unknown") has a name and is displayable
    return class_spec != UNKNOWN_SPEC and class_spec in CLASS_SPEC_MAP
