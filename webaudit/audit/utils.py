import math
import re
from typing import Optional

_WS_RE = re.compile(r"\s+")


def clamp(x: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, x))


def safe_ratio(part: float, whole: float) -> float:
    """part / whole * 100, or 0 when there is nothing to divide by."""
    if not whole:
        return 0.0
    return part * 100.0 / whole


def round_half_up(x: float) -> int:
    # round() is banker's rounding; scores use the schoolbook kind
    return int(math.floor(x + 0.5))


def collapse_ws(text: Optional[str]) -> str:
    if not text:
        return ""
    return _WS_RE.sub(" ", text).strip()


def safe_str(value) -> str:
    """
    Normalize BeautifulSoup attribute values to a stripped string.
    Handles None, list (multi-valued attributes like rel/class) and str.
    """
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value).strip()
    return str(value).strip()
