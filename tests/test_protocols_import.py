"""Protocol module smoke test."""

from __future__ import annotations

from projdash.data import protocols as data_protocols
from projdash.services import protocols


def test_protocols_module_imports() -> None:
    assert hasattr(protocols, "QueryEngineProtocol")
    assert hasattr(protocols, "DashboardServiceProtocol")
    assert hasattr(data_protocols, "ProjectSource")
    assert hasattr(data_protocols, "PreferenceStore")
