from __future__ import annotations

from enum import Enum


class SubAdminRole(str, Enum):
    """Roles a sub-admin account can be created with."""

    SHO = "sho"
    CO = "co"
    ASP = "asp"

    @property
    def label(self) -> str:
        return {
            SubAdminRole.SHO: "SHO",
            SubAdminRole.CO: "All Circle",
            SubAdminRole.ASP: "ASP",
        }[self]
