from __future__ import annotations
from typing import Iterable, Iterator, List

import psutil

from ..models import ProcConn

class SnapshotError(RuntimeError):
    """The process list itself could not be read."""

def list_processes() -> list:
    try:
        return list(psutil.process_iter())
    except (psutil.Error, OSError) as e:
        raise SnapshotError(f"cannot enumerate processes: {e}") from e

def _addr(a) -> tuple[str, int]:
    if not a:
        return ("", 0)
    ip = a.ip if hasattr(a, 'ip') else a[0]
    port = a.port if hasattr(a, 'port') else a[1]
    return (ip, port)

def _proc_conns(p) -> list:
    # psutil >= 6 renamed Process.connections() to net_connections()
    getter = getattr(p, 'net_connections', None) or p.connections
    return getter(kind='inet')

def proc_conns(procs: Iterable, name_filter: str) -> Iterator[ProcConn]:
    """
    Yield one ProcConn per connection of every process whose name contains
    name_filter, ignoring case. Processes whose name or connections can't be
    read contribute nothing.
    """
    needle = name_filter.casefold()
    for p in procs:
        try:
            name = p.name()
        except (psutil.Error, OSError):
            continue
        if needle not in name.casefold():
            continue
        try:
            conns = _proc_conns(p)
        except (psutil.Error, OSError):
            continue
        rows: List[ProcConn] = []
        for c in conns:
            rows.append(ProcConn(pid=p.pid, name=name, laddr=_addr(c.laddr),
                                 raddr=_addr(c.raddr), state=str(c.status)))
        yield from rows
