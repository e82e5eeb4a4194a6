"""Unit tests for selvis.infra.catalog.host_version."""

from __future__ import annotations

import pytest

from selvis.infra.catalog.host_version import HostVersion


class TestHostVersion:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1.16.5", HostVersion(1, 16, 5)),
            ("1.8", HostVersion(1, 8, 0)),
            ("git-Paper-196 (MC: 1.20.4)", HostVersion(1, 20, 4)),
            ("1.13.2-R0.1-SNAPSHOT", HostVersion(1, 13, 2)),
        ],
    )
    def test_parse(self, raw: str, expected: HostVersion) -> None:
        assert HostVersion.parse(raw) == expected

    @pytest.mark.unit
    def test_parse_without_version_raises(self) -> None:
        with pytest.raises(ValueError, match="No host version"):
            HostVersion.parse("unknown")

    @pytest.mark.unit
    def test_ordering(self) -> None:
        assert HostVersion(1, 8) < HostVersion(1, 9)
        assert HostVersion(1, 12, 2) < HostVersion(1, 13)
        assert HostVersion(1, 10) < HostVersion(1, 10, 1)
        assert HostVersion(2, 0) > HostVersion(1, 20, 4)

    @pytest.mark.unit
    def test_str(self) -> None:
        assert str(HostVersion(1, 16)) == "1.16.0"
