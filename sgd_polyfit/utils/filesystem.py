#!filepath: sgd_polyfit/utils/filesystem.py
import shutil
from pathlib import Path
from typing import List, Optional

from sgd_polyfit.utils.logger import logs


class FileSystem:
    """
    File system helpers for the export directory
    - create directories
    - atomic writes (tmp file -> rename)
    - remove files / directories
    - list exported files
    """

    @staticmethod
    def ensure_dir(path: str | Path) -> Path:
        """
        Create the directory if it does not exist. Idempotent.
        """
        p = Path(path)
        if not p.exists():
            p.mkdir(parents=True, exist_ok=True)
            logs.debug(f"[FS] created dir: {p}")
        return p

    @staticmethod
    def file_exists(path: str | Path) -> bool:
        return Path(path).exists()

    @staticmethod
    def safe_write(path: str | Path, data: bytes) -> None:
        """
        Atomic write:
            1) write to <path>.tmp
            2) rename -> path
        """
        path = Path(path)
        FileSystem.ensure_dir(path.parent)

        tmp_path = path.with_suffix(path.suffix + ".tmp")

        with open(tmp_path, "wb") as f:
            f.write(data)

        tmp_path.replace(path)
        logs.debug(f"[FS] wrote {len(data)} bytes: {path}")

    @staticmethod
    def remove(path: str | Path) -> None:
        p = Path(path)

        if not p.exists():
            logs.debug(f"[FS] nothing to remove: {p}")
            return

        if p.is_dir():
            shutil.rmtree(p)
            logs.debug(f"[FS] removed dir: {p}")
        else:
            p.unlink()
            logs.debug(f"[FS] removed file: {p}")

    @staticmethod
    def scan_dir(path: str | Path, suffix: Optional[str] = None) -> List[Path]:
        """
        Files directly under path (optionally filtered by suffix), sorted.
        """
        p = Path(path)
        if not p.exists():
            return []

        return sorted(
            f for f in p.iterdir()
            if f.is_file() and (suffix is None or f.suffix == suffix)
        )
