from __future__ import annotations

from appinit.selfcheck import run_selfcheck


def test_selfcheck_imports_pass() -> None:
    report = run_selfcheck(smoke=False)
    assert report.ok
    assert report.rows


def test_selfcheck_smoke_launch_completes() -> None:
    report = run_selfcheck(smoke=True)
    assert report.ok
    assert any(row.name == "smoke_launch" and "outcome=completed" in row.detail for row in report.rows)
