"""Named file selection and filtering presets for ODF conversion."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ProfileName(enum.StrEnum):
    VEHICLE = "vehicle"
    BUILDING = "building"
    WEAPON = "weapon"
    DATAPAK = "datapak"
    PILOT = "pilot"
    ALL = "all"


@dataclass(frozen=True)
class Profile:
    """Which ODF files belong to one output document and how to filter them."""

    name: str
    output_name: str
    include_prefixes: tuple[str, ...] = ()
    exclude_substrings: tuple[str, ...] = ()
    filter_noise: bool = True

    def matches(self, file_name: str) -> bool:
        """Check a file name against the include prefixes and exclusions.

        Both checks ignore case. No include prefixes means every file matches.
        """
        lowered = file_name.lower()
        if self.include_prefixes and not lowered.startswith(
            tuple(p.lower() for p in self.include_prefixes)
        ):
            return False
        return not any(s.lower() in lowered for s in self.exclude_substrings)


_REGISTRY: dict[str, Profile] = {
    ProfileName.VEHICLE: Profile(
        ProfileName.VEHICLE,
        "Vehicle-ODF-Data.json",
        include_prefixes=("fv", "iv", "ev", "cv"),
        exclude_substrings=("_config",),
    ),
    ProfileName.BUILDING: Profile(
        ProfileName.BUILDING,
        "Building-ODF-Data.json",
        include_prefixes=("fb", "ib", "eb", "cb"),
    ),
    ProfileName.WEAPON: Profile(
        ProfileName.WEAPON,
        "Weapon-ODF-Data.json",
        filter_noise=False,
    ),
    ProfileName.DATAPAK: Profile(ProfileName.DATAPAK, "DataPak-ODF-Data.json"),
    ProfileName.PILOT: Profile(
        ProfileName.PILOT,
        "Pilot-ODF-Data.json",
        include_prefixes=("fs", "is", "es", "cs"),
    ),
    ProfileName.ALL: Profile(ProfileName.ALL, "ODF-Data.json"),
}


def available_profiles() -> list[str]:
    return sorted(_REGISTRY)


def get_profile(name: str) -> Profile:
    """Get a profile by name.

    Args:
        name: Profile name (e.g., "vehicle", "building", "weapon").

    Returns:
        The matching Profile.

    Raises:
        ValueError: If the profile name is unknown.
    """
    profile = _REGISTRY.get(name)
    if profile is None:
        raise ValueError(
            f"unknown profile: {name!r}. "
            f"Available: {', '.join(available_profiles())}"
        )
    return profile
