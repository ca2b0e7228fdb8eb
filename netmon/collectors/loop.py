from __future__ import annotations
import logging, platform, sys, time
from functools import partial
from typing import Callable, Iterable, Optional, TextIO

from ..config import CFG
from ..models import Report, StatsTable
from ..report import build_report, render
from ..utils.term import clear_screen
from .generic import list_processes, proc_conns
from .linux import StatsError, read_ss_stats

logger = logging.getLogger(__name__)

ProcSource = Callable[[], Iterable]
StatsSource = Callable[[], Optional[StatsTable]]

def no_stats() -> Optional[StatsTable]:
    return None

def default_stats_source(cfg: CFG, system: Optional[str] = None) -> StatsSource:
    if (system or platform.system()) != 'Linux':
        return no_stats
    return partial(read_ss_stats, cfg.ss_cmd, cfg.timeout)

def run_cycle(name_filter: str, proc_source: ProcSource, stats_source: StatsSource) -> Report:
    """
    One collect/join pass. A stats failure degrades the cycle to N/A values;
    a failing proc_source (SnapshotError) propagates.
    """
    try:
        stats = stats_source()
    except StatsError as e:
        logger.warning("could not parse ss output: %s", e)
        stats = None
    procs = proc_source()
    return build_report(proc_conns(procs, name_filter), stats)

def monitor_loop(cfg: CFG, name_filter: str,
                 proc_source: ProcSource = list_processes,
                 stats_source: Optional[StatsSource] = None,
                 out: Optional[TextIO] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 clear: Optional[Callable[[], object]] = None) -> int:
    out = out or sys.stdout
    if stats_source is None:
        stats_source = default_stats_source(cfg)
    if clear is None:
        clear = partial(clear_screen, cfg.timeout)
    while True:
        report = run_cycle(name_filter, proc_source, stats_source)
        out.write(render(report))
        out.flush()
        if cfg.once:
            return 0
        sleep(cfg.interval)
        if cfg.clear:
            clear()
