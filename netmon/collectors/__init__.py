from .generic import SnapshotError, list_processes, proc_conns
from .linux import StatsError, parse_ss_output, read_ss_stats
from .loop import monitor_loop, run_cycle
