"""Host (game server) version parsing and comparison."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, order=True)
class HostVersion:
    """Comparable ``major.minor.patch`` host version.

    Example:
        >>> HostVersion.parse("1.16.5") >= HostVersion(1, 13)
        True
        >>> HostVersion.parse("git-Paper-196 (MC: 1.20.4)")
        HostVersion(major=1, minor=20, patch=4)
    """

    major: int
    minor: int
    patch: int = 0

    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"(\d+)\.(\d+)(?:\.(\d+))?")

    @classmethod
    def parse(cls, raw: str) -> HostVersion:
        """Extract the first ``X.Y[.Z]`` version found in ``raw``.

        Raises:
            ValueError: If ``raw`` contains no version number.
        """
        match = cls._PATTERN.search(raw)
        if match is None:
            msg = f"No host version found in {raw!r}"
            raise ValueError(msg)
        major, minor, patch = match.groups()
        return cls(int(major), int(minor), int(patch or 0))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
