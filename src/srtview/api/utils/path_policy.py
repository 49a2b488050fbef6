from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

from srtview.api.config import load_config
from srtview.api.errors import InvalidPathError, NotFoundError


def _has_dot_segments(p: Path) -> bool:
    return any(part in (".", "..") for part in p.parts)


def _norm(p: str) -> str:
    if "\x00" in p:
        raise InvalidPathError("path contains null byte", details={"path": p})
    return p.strip().strip('"').strip("'")


def _commonpath_ok(resolved: Path, root: Path) -> bool:
    """
    Containment check: commonpath([resolved, root]) == root.
    Prefix comparison would accept /data2 under /data.
    """
    try:
        cp = os.path.commonpath([str(resolved), str(root)])
    except ValueError:
        # Different drives on Windows, or mixed absolute/relative.
        return False
    return Path(cp) == root


@dataclass(frozen=True)
class PathPolicy:
    allowed_roots: Tuple[Path, ...]

    def _validate_string(self, p: str) -> str:
        if not isinstance(p, str) or not p.strip():
            raise InvalidPathError("path is empty")
        return _norm(p)

    def ensure_allowed(self, p: str) -> str:
        """
        Validate path string and ensure it is contained within allowed_roots.
        No filesystem existence requirement.
        """
        original = self._validate_string(p)
        pp = Path(original)

        if not pp.is_absolute():
            raise InvalidPathError("path must be absolute", details={"path": original})
        if _has_dot_segments(pp):
            raise InvalidPathError("path contains '.' or '..' segments", details={"path": original})

        resolved = pp.resolve(strict=False)
        for root in self.allowed_roots:
            if _commonpath_ok(resolved, root):
                return str(resolved)
        raise InvalidPathError(
            "path must be under allowed_roots",
            details={"path": original, "allowed_roots": [str(r) for r in self.allowed_roots]},
        )

    def ensure_file_exists(self, p: str) -> str:
        ap = self.ensure_allowed(p)
        path = Path(ap)
        if not path.exists():
            raise NotFoundError("file does not exist", details={"path": ap})
        if not path.is_file():
            raise InvalidPathError("path is not a file", details={"path": ap})
        return ap


def get_path_policy(allowed_roots: Optional[Iterable[str]] = None) -> PathPolicy:
    cfg = load_config()

    roots = list(allowed_roots) if allowed_roots else list(cfg.allowed_roots)
    if not roots:
        roots = [cfg.data_root]

    # Normalize roots to resolved absolute Paths once.
    root_paths = []
    for r in roots:
        r0 = _norm(r)
        rp = Path(r0)
        if not rp.is_absolute():
            raise InvalidPathError("allowed root must be absolute", details={"root": r0})
        root_paths.append(rp.resolve(strict=False))

    return PathPolicy(allowed_roots=tuple(root_paths))
