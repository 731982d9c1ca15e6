from __future__ import annotations

from pathlib import Path


def write_text_corpus(root: Path, files: dict[str, str]) -> Path:
    """Create a corpus directory holding the provided relative-path -> text files."""
    root.mkdir(parents=True, exist_ok=True)
    for relative, text in files.items():
        dest = root / relative
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(text, encoding="utf-8")
    return root
