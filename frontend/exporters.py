"""Export helpers for saving generated diagram sources to files for download."""
from __future__ import annotations
from typing import Dict
import tempfile
import os


EXT_MAP = {
    "svg": "svg",
    "tex": "tikz",  # raw tikz/latex content saved with .tikz extension
}

def save_outputs(outputs: Dict[str, bytes]) -> Dict[str, str]:
    paths: Dict[str, str] = {}
    if not outputs:
        return paths
    base_dir = tempfile.mkdtemp(prefix="tikzsvg_")
    for key, data in outputs.items():
        ext = EXT_MAP.get(key, key)
        path = os.path.join(base_dir, f"diagram.{ext}")
        with open(path, "wb") as f:
            f.write(data)
        paths[key] = path
    return paths

__all__ = ["save_outputs"]
