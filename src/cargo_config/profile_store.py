# src/cargo_config/profile_store.py
from __future__ import annotations
from pathlib import Path
from typing import Callable, List, Optional
import logging
import os
import shutil

from cargo_config.config import CargoPaths, CURRENT_FILE_NAME, PROFILE_SUFFIX
from cargo_config.models import ProfileEntry
from cargo_config.utils.open_editor import open_editor

log = logging.getLogger(__name__)

MIGRATED_PROFILE = "config"


def display_name(file_name: str) -> str:
    """ファイル名の最初の ``.toml`` より前をプロフィール名として扱う。"""
    return file_name.split(PROFILE_SUFFIX, 1)[0]


def validate_name(name: str) -> str:
    if not name:
        raise ValueError("profile name must not be empty")
    if name == CURRENT_FILE_NAME:
        raise ValueError(f"`{name}` is a reserved name")
    if "/" in name or os.sep in name:
        raise ValueError(f"profile name must not contain a path separator: {name}")
    return name


class ProfileStore:
    def __init__(self, paths: CargoPaths | None = None):
        self.paths = paths or CargoPaths.from_home()

    def _profile_dir(self) -> Path:
        # 初回利用時に作成（既にあれば何もしない）
        self.paths.profile_dir.mkdir(parents=True, exist_ok=True)
        return self.paths.profile_dir

    def create(self, name: str) -> Path:
        validate_name(name)
        self._profile_dir()
        path = self.paths.profile_path(name)
        # "x" は既存ファイルがあれば FileExistsError
        with path.open("xb"):
            pass
        log.info("created profile %s at %s", name, path)
        return path

    def switch(self, name: str, copy: bool = False) -> Path:
        validate_name(name)
        self._profile_dir()
        current = self.paths.current_file
        current.touch(exist_ok=True)
        # 追記ではなく全置換
        current.write_text(name, encoding="utf-8")

        link = self.paths.active_link
        link.unlink(missing_ok=True)

        source = self.paths.profile_path(name)
        if copy:
            shutil.copyfile(source, link)
        else:
            os.link(source, link)
        log.info("switched to %s (%s)", name, "copy" if copy else "hard link")
        return link

    def current(self) -> str:
        return self.paths.current_file.read_text(encoding="utf-8")

    def list(self) -> List[ProfileEntry]:
        active = self.current()
        entries: List[ProfileEntry] = []
        # 並び順はディレクトリの列挙順のまま
        with os.scandir(self._profile_dir()) as it:
            for e in it:
                name = display_name(e.name)
                if name == CURRENT_FILE_NAME:
                    continue
                entries.append(ProfileEntry(name=name, active=(name == active)))
        return entries

    def remove(self, name: str) -> None:
        validate_name(name)
        path = self.paths.profile_path(name)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise FileNotFoundError(f"`{name}` does not exist") from e
        if name == self._current_or_none():
            log.warning("removed the active profile %s; config.toml still holds its data", name)
        log.info("removed profile %s", name)

    def edit(self, editor: str, name: str) -> Path:
        validate_name(name)
        self._profile_dir()
        path = self.paths.profile_path(name)
        return open_editor(path, editor)

    def _current_or_none(self) -> str | None:
        try:
            return self.current()
        except OSError:
            return None

    def initialise(self, on_migrate: Optional[Callable[[], None]] = None) -> bool:
        """
        pointer ファイルが無く、管理外の config.toml が Cargo 側にあれば
        ``config`` プロフィールとして取り込んで有効化する。
        on_migrate はコピー前に呼ばれる（警告表示用）。
        取り込んだら True。
        """
        if self.paths.current_file.exists():
            return False
        original = self.paths.active_link
        if not original.is_file():
            return False

        log.info("config.toml exists in %s, moving to %s", self.paths.cargo_dir, self.paths.profile_dir)
        if on_migrate is not None:
            on_migrate()
        data = original.read_bytes()
        self._profile_dir()
        with self.paths.profile_path(MIGRATED_PROFILE).open("xb") as f:
            f.write(data)
        self.switch(MIGRATED_PROFILE)
        return True
