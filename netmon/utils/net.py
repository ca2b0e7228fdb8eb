from __future__ import annotations
from typing import Tuple

def endpoint_str(addr: Tuple[str, int]) -> str:
    ip, port = addr
    return f"{ip}:{port}"
