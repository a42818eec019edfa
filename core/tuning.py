"""core/tuning.py — Data-driven menu constants.

Grid geometry, default button icons and scheduler switches live in
``data/tuning.toml`` and are loaded once at startup.  Any module can
read a value with::

    from core.tuning import get
    columns = get("menu", "columns", 9)

Values that are missing (or a missing file) fall back to the default
passed by the caller, so the library works with no file at all.
Call ``reload()`` to re-read the file after editing it.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    try:
        import tomli as tomllib            # pip install tomli
    except ModuleNotFoundError:
        tomllib = None                     # type: ignore[assignment]


DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"

_data: dict = {}
_path: Path | None = None
_loaded: bool = False


def load(path: str | Path | None = None) -> None:
    """Load (or reload) menu constants from *path*.

    If *path* is ``None``, use ``data/tuning.toml`` next to the
    ``core`` package.
    """
    global _data, _path, _loaded

    path = DEFAULT_PATH if path is None else Path(path)
    _path = path
    _loaded = True

    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        _data = {}
        return

    if tomllib is None:
        print("[TUNING] No TOML parser available (need Python 3.11+ or `pip install tomli`)")
        _data = {}
        return

    with open(path, "rb") as f:
        _data = tomllib.load(f)

    print(f"[TUNING] Loaded {_count_leaves(_data)} values from {path}")


def reload() -> None:
    """Re-read the tuning file from disk."""
    load(_path)


def _ensure_loaded() -> None:
    if not _loaded:
        load()


def _walk(section_path: str):
    node = _data
    for part in section_path.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
        if node is None:
            return None
    return node


def get(section: str, key: str, default=None):
    """Read a tuning value.

    *section* uses dot-notation for nested tables:
    ``get("menu.close_button", "label", "Close")`` reads
    ``[menu.close_button] label``.
    """
    _ensure_loaded()
    node = _walk(section)
    if isinstance(node, dict):
        return node.get(key, default)
    return default


def section(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    _ensure_loaded()
    node = _walk(section_path)
    return dict(node) if isinstance(node, dict) else {}


def _count_leaves(d: dict) -> int:
    return sum(_count_leaves(v) if isinstance(v, dict) else 1 for v in d.values())
