from __future__ import annotations
import argparse, logging, sys
from .config import ConfigError, init_cfg_from_args
from .collectors import SnapshotError, monitor_loop

logger = logging.getLogger("netmon")

def parse_args(argv=None):
    ap = argparse.ArgumentParser(prog='netmon', description='Live TCP/UDP connections of processes matching a name')
    ap.add_argument('name_filter', help='case-insensitive substring of the process name ("" matches all)')
    ap.add_argument('--interval', type=float, default=None, help='seconds between refreshes (default 3)')
    ap.add_argument('--timeout', type=float, default=None, help='timeout for ss and screen clear (default 5)')
    ap.add_argument('--once', action='store_true', help='print one report and exit')
    ap.add_argument('--no-clear', action='store_true', help='do not clear the screen between refreshes')
    ap.add_argument('--config', type=str, default=None, help='YAML or JSON file with default settings')
    ap.add_argument('-v', '--verbose', action='store_true')
    return ap, ap.parse_args(argv)

def main(argv=None) -> int:
    ap, args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='[%(levelname)s] %(message)s', stream=sys.stderr)
    try:
        cfg = init_cfg_from_args(args)
    except ConfigError as e:
        ap.error(str(e))

    try:
        return monitor_loop(cfg, args.name_filter)
    except SnapshotError as e:
        logger.critical("error retrieving processes: %s", e)
        return 1
    except KeyboardInterrupt:
        return 0

if __name__ == '__main__':
    sys.exit(main())
