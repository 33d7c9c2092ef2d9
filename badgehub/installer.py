"""Installing every file of a project revision into the local directory."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .client import BadgeHubClient, BadgeHubError, ProjectDetail

Progress = Callable[[str], None]


class InstallError(Exception):
    """Raised when a project cannot be installed."""


def _make_dir(path: Path) -> None:
    try:
        path.mkdir(mode=0o755, exist_ok=True)
    except OSError as exc:
        raise InstallError(f"Could not create directory '{path.as_posix()}'") from exc


def install_project(
    client: BadgeHubClient,
    details: ProjectDetail,
    progress: Progress | None = None,
) -> list[Path]:
    """Download all files of *details* below the client's installation directory.

    *progress* receives status messages as the installation proceeds. Returns
    the paths written; stops at the first failed download.
    """

    def report(message: str) -> None:
        if progress is not None:
            progress(message)

    report("Starting installation...")
    install_root = client.installation_dir
    _make_dir(install_root)
    _make_dir(install_root / details.slug)

    written = []
    total = len(details.files)
    for number, file_info in enumerate(details.files, start=1):
        report(f"Downloading ({number}/{total}): {file_info.full_path}")
        try:
            written.append(client.download_project_file(file_info, details.slug))
        except BadgeHubError as exc:
            raise InstallError(f"Failed to download {file_info.full_path}") from exc

    report("Installation complete!")
    return written