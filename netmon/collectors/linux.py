import logging
import subprocess
from typing import List, Optional, Sequence

from ..models import ConnKey, QueueCounters, StatsTable

logger = logging.getLogger(__name__)

SS_CMD = ["ss", "-tuln", "-o", "state", "established"]

# Recv-Q column position when no header line was seen ("Netid Recv-Q ...")
DEFAULT_RECVQ_COL = 1

class StatsError(RuntimeError):
    """The socket-statistics command could not produce usable output."""

def _is_header(fields: List[str]) -> bool:
    return fields[0] in ("Netid", "State") or "Recv-Q" in fields

def parse_ss_output(text: str) -> StatsTable:
    """
    Build a StatsTable from `ss` output.

    Only lines starting in column 0 are records; indented continuation lines
    (timers, users:(...)) are ignored. A header line fixes where Recv-Q sits,
    since ss drops the State column when a state filter is given:
      Netid Recv-Q Send-Q Local Address:Port Peer Address:Port
      tcp   0      0      127.0.0.1:49911    127.0.0.1:42488
    Short lines are skipped. A repeated key keeps the last counters.
    """
    table: StatsTable = {}
    col = DEFAULT_RECVQ_COL
    for line in text.splitlines():
        if not line.strip():
            continue
        if line[0] in (' ', '\t'):
            continue
        fields = line.split()
        if _is_header(fields):
            if "Recv-Q" in fields:
                col = fields.index("Recv-Q")
            continue
        if len(fields) < col + 4:
            logger.debug("not enough fields in ss line: %r", line)
            continue
        rx, tx, local, remote = fields[col:col + 4]
        table[ConnKey.from_tokens(local, remote)] = QueueCounters(rx=rx, tx=tx)
    return table

def read_ss_stats(cmd: Optional[Sequence[str]] = None, timeout: Optional[float] = None) -> StatsTable:
    cmd = list(cmd or SS_CMD)
    try:
        out = subprocess.check_output(cmd, stderr=subprocess.DEVNULL, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        raise StatsError(f"{cmd[0]} timed out after {timeout}s") from e
    except subprocess.CalledProcessError as e:
        raise StatsError(f"{cmd[0]} exited with status {e.returncode}") from e
    except OSError as e:
        raise StatsError(f"could not run {cmd[0]}: {e}") from e
    try:
        text = out.decode("utf-8")
    except UnicodeDecodeError as e:
        raise StatsError(f"unreadable {cmd[0]} output: {e}") from e
    return parse_ss_output(text)
