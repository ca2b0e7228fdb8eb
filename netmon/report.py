from __future__ import annotations
from typing import Iterable, List, Optional

from .models import NA, ProcConn, Report, Row, StatsTable
from .utils.net import endpoint_str

COLUMNS = [
    ("PID", 6), ("Process", 15), ("Local Address", 22), ("Remote Address", 22),
    ("State", 12), ("Rx Bytes", 10), ("Tx Bytes", 10),
]

def join_row(pc: ProcConn, stats: Optional[StatsTable]) -> Row:
    rx = tx = NA
    if stats is not None:
        q = stats.get(pc.key)
        if q is not None:
            rx, tx = q.rx, q.tx
    return Row(pid=pc.pid, name=pc.name, local=endpoint_str(pc.laddr),
               remote=endpoint_str(pc.raddr), state=pc.state, rx=rx, tx=tx)

def build_report(conns: Iterable[ProcConn], stats: Optional[StatsTable]) -> Report:
    return Report(rows=[join_row(pc, stats) for pc in conns], stats=stats)

def _fmt(values) -> str:
    return " ".join(f"{str(v):<{w}}" for v, (_, w) in zip(values, COLUMNS))

def render(report: Report) -> str:
    lines: List[str] = [_fmt(label for label, _ in COLUMNS)]
    for r in report.rows:
        lines.append(_fmt((r.pid, r.name, r.local, r.remote, r.state, r.rx, r.tx)))
    return "\n".join(lines) + "\n"
