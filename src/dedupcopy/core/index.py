"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/index.py
First-seen-wins map from content digest to the relative path that produced it.
"""
from typing import Dict, Iterator, Optional, Tuple


class DuplicateIndex:
    """
    Maps a content digest to the relative path of the first file with that content.

    One instance per run. Entries are never removed or replaced, so memory grows
    linearly with the number of distinct contents seen.
    """

    def __init__(self):
        self._paths: Dict[str, str] = {}

    def lookup(self, digest: str) -> Optional[str]:
        """Returns the first relative path recorded for digest, or None."""
        return self._paths.get(digest)

    def record(self, digest: str, relative_path: str) -> None:
        """Records relative_path for digest unless digest is already known."""
        self._paths.setdefault(digest, relative_path)

    def __contains__(self, digest: str) -> bool:
        return digest in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        """Iterates (digest, relative_path) pairs in insertion order."""
        return iter(self._paths.items())

    def __repr__(self):
        return f"<DuplicateIndex entries={len(self._paths)}>"
