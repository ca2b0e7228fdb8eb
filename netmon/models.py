from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

NA = "N/A"

# (host, port) exactly as the source printed them
Endpoint = Tuple[str, str]

def split_endpoint(token: str) -> Endpoint:
    """Split an 'addr:port' token on the last colon, keeping both halves verbatim."""
    host, sep, port = token.rpartition(':')
    if not sep:
        return (token, "")
    return (host, port)

@dataclass(frozen=True)
class ConnKey:
    local: Endpoint
    remote: Endpoint

    @classmethod
    def from_tokens(cls, local: str, remote: str) -> "ConnKey":
        return cls(split_endpoint(local), split_endpoint(remote))

    def __str__(self) -> str:
        return f"{self.local[0]}:{self.local[1]}->{self.remote[0]}:{self.remote[1]}"

@dataclass(frozen=True)
class QueueCounters:
    rx: str  # Recv-Q, verbatim
    tx: str  # Send-Q, verbatim

StatsTable = Dict[ConnKey, QueueCounters]

@dataclass(frozen=True)
class ProcConn:
    pid: int
    name: str
    laddr: Tuple[str, int]
    raddr: Tuple[str, int]
    state: str  # 'ESTABLISHED', 'NONE', ...

    @property
    def key(self) -> ConnKey:
        return ConnKey((self.laddr[0], str(self.laddr[1])), (self.raddr[0], str(self.raddr[1])))

@dataclass(frozen=True)
class Row:
    pid: int
    name: str
    local: str
    remote: str
    state: str
    rx: str = NA
    tx: str = NA

@dataclass
class Report:
    rows: List[Row]
    stats: Optional[StatsTable] = None

    @property
    def has_stats(self) -> bool:
        return self.stats is not None
