from __future__ import annotations
import json, logging, math
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 3.0
DEFAULT_TIMEOUT = 5.0
CONFIG_DIR = Path("~/.config/netmon").expanduser()

_BOOL_WORDS = {"true": True, "yes": True, "on": True, "false": False, "no": False, "off": False}

class ConfigError(ValueError):
    pass

def _default_ss_cmd() -> List[str]:
    from .collectors.linux import SS_CMD
    return list(SS_CMD)

def config_path(path: str) -> Path:
    """Absolute paths as given; relative ones from the cwd, else from CONFIG_DIR."""
    pp = Path(path).expanduser()
    if not pp.is_absolute() and not pp.exists():
        pp = CONFIG_DIR / pp
    return pp.resolve()

@dataclass
class CFG:
    interval: float = DEFAULT_INTERVAL
    timeout: float = DEFAULT_TIMEOUT  # applies to ss and the screen clear
    clear: bool = True
    once: bool = False
    ss_cmd: List[str] = field(default_factory=_default_ss_cmd)

    def validate(self) -> "CFG":
        for name in ("interval", "timeout"):
            v = getattr(self, name)
            if not math.isfinite(v) or v <= 0:
                raise ConfigError(f"{name} must be a positive number, got {v}")
        if not self.ss_cmd:
            raise ConfigError("ss_cmd must not be empty")
        return self

def _as_bool(p: Path, k: str, v) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str) and v.strip().lower() in _BOOL_WORDS:
        return _BOOL_WORDS[v.strip().lower()]
    raise ConfigError(f"{p}: {k} must be true or false, got {v!r}")

def load_cfg_file(path: Optional[str], cfg: Optional[CFG] = None) -> CFG:
    """Overlay a YAML or JSON mapping onto cfg. A missing file leaves cfg as is."""
    cfg = cfg or CFG()
    if not path:
        return cfg
    p = config_path(path)
    if not p.exists():
        print(f"[warn] config not found: {p}")
        return cfg
    txt = p.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(txt) if p.suffix in (".yaml", ".yml") else json.loads(txt)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"cannot parse {p}: {e}") from e
    if data is None:
        return cfg
    if not isinstance(data, dict):
        raise ConfigError(f"{p}: expected a mapping at top level")
    known = {f.name for f in fields(CFG)}
    for k, v in data.items():
        if k not in known:
            logger.warning("%s: ignoring unknown key %r", p, k)
            continue
        if k in ("interval", "timeout"):
            if isinstance(v, bool):
                raise ConfigError(f"{p}: {k} must be a number")
            try:
                v = float(v)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"{p}: {k} must be a number") from e
        elif k == "ss_cmd":
            if isinstance(v, str):
                v = v.split()
            elif isinstance(v, (list, tuple)):
                v = [str(x) for x in v]
            else:
                raise ConfigError(f"{p}: ss_cmd must be a string or a list")
        else:
            v = _as_bool(p, k, v)
        setattr(cfg, k, v)
    return cfg

def init_cfg_from_args(args) -> CFG:
    cfg = load_cfg_file(getattr(args, "config", None))
    if getattr(args, "interval", None) is not None:
        cfg.interval = float(args.interval)
    if getattr(args, "timeout", None) is not None:
        cfg.timeout = float(args.timeout)
    if getattr(args, "once", False):
        cfg.once = True
    if getattr(args, "no_clear", False):
        cfg.clear = False
    return cfg.validate()
