"""What the signed-in user is allowed to see and do."""

from __future__ import annotations

from dataclasses import dataclass, field

ANY = -1


@dataclass
class AuthState:
    """The outcome of a sign-in: user, region, areas and permissions."""

    user: str = ""
    state: bool = False
    permissions: list[str] = field(default_factory=list)
    region: int = 0
    areas: list[int] = field(default_factory=list)

    def areas_text(self) -> str:
        """Areas separated by spaces, or ``*`` when all are allowed."""
        if not self.areas:
            return ""
        if ANY in self.areas:
            return "*"
        return "".join(f"{a} " for a in self.areas)

    def permissions_text(self) -> str:
        """Permissions one per line; the last entry is not listed."""
        return "".join(f"{p}\n" for p in self.permissions[:-1])

    def region_text(self) -> str:
        """The region number, or ``*`` when all regions are allowed."""
        return "*" if self.region == ANY else str(self.region)

    def summary(self) -> str:
        """User, region, areas and permissions, one per line."""
        return f"{self.user}\n{self.region}\n{self.areas_text()}\n{self.permissions_text()}"