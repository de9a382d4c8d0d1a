from __future__ import annotations
import logging
import os
import shutil
import subprocess
from pathlib import Path

log = logging.getLogger(__name__)


def resolve_editor(editor: str) -> Path:
    """
    PATH 上から editor の実行ファイルを探し、正規化したパスを返す。

    - 見つからない: FileNotFoundError
    - PATH が空でカレントディレクトリも取れない: PermissionError
    - 正規化に失敗: OSError
    """
    search_path = os.environ.get("PATH", "")
    if not search_path:
        try:
            os.getcwd()
        except OSError as e:
            raise PermissionError(
                f"cannot get current directory and PATH is empty (looking for {editor!r})"
            ) from e

    found = shutil.which(editor)
    if found is None:
        raise FileNotFoundError(f"cannot find binary path for editor {editor!r}")

    try:
        return Path(found).resolve(strict=True)
    except OSError as e:
        raise OSError(f"cannot canonicalize editor path {found}: {e}") from e


def open_editor(path: Path, editor: str) -> Path:
    """
    profile ファイルをエディタで開く。起動だけして終了は待たない。
    """
    exe = resolve_editor(editor)
    log.debug("launching %s %s", exe, path)
    subprocess.Popen([str(exe), str(path)], start_new_session=True)  # 非同期でOK
    return exe
