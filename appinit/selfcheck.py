from __future__ import annotations

import asyncio
import importlib
from dataclasses import dataclass

from .presets import make_instant_launch_deck
from .services import build_default_launch_service


@dataclass
class CheckRow:
    name: str
    ok: bool
    detail: str


@dataclass
class SelfCheckReport:
    rows: list[CheckRow]

    @property
    def ok(self) -> bool:
        return all(row.ok for row in self.rows)

    def to_text(self) -> str:
        lines: list[str] = []
        for row in self.rows:
            status = "OK" if row.ok else "FAIL"
            lines.append(f"[{status}] {row.name}: {row.detail}")
        lines.append(f"overall: {'OK' if self.ok else 'FAIL'}")
        return "\n".join(lines)


async def _smoke_launch() -> CheckRow:
    session = build_default_launch_service().prepare(make_instant_launch_deck())
    loop = asyncio.get_running_loop()

    def _auto_continue(state: object) -> None:
        if session.pending_action() is not None:
            loop.call_soon(session.resume)

    session.cell.subscribe(_auto_continue)
    result = await asyncio.wait_for(session.run(), timeout=10.0)
    detail = f"outcome={result.outcome}, ran={len(result.ran)}, transitions={session.cell.mutations}"
    return CheckRow("smoke_launch", result.ok, detail)


def run_selfcheck(*, smoke: bool = True) -> SelfCheckReport:
    rows: list[CheckRow] = []

    for module_name in ("yaml",):
        try:
            mod = importlib.import_module(module_name)
            version = getattr(mod, "__version__", "unknown")
            rows.append(CheckRow(module_name, True, f"version={version}"))
        except Exception as exc:
            rows.append(CheckRow(module_name, False, str(exc)))

    if smoke and all(row.ok for row in rows):
        try:
            rows.append(asyncio.run(_smoke_launch()))
        except Exception as exc:
            rows.append(CheckRow("smoke_launch", False, f"{type(exc).__name__}: {exc}"))

    return SelfCheckReport(rows=rows)
