"""HTTP client for the BadgeHub project catalogue."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from urllib.parse import quote

import requests

from .utils import ensure_dir_exists, get_json_string

log = logging.getLogger(__name__)

USER_AGENT = "lvgl-badgehub-client/1.0"
DEFAULT_INSTALLATION_DIR = "installation_dir"
REQUEST_TIMEOUT = 30.0
_CHUNK_SIZE = 64 * 1024


class BadgeHubError(Exception):
    """Raised when the catalogue cannot be reached or a download fails."""


@dataclass
class Project:
    """Summary of a project as shown in the project list."""

    name: str | None
    slug: str | None
    description: str | None
    project_url: str | None
    icon_url: str | None
    revision: int = 0


@dataclass
class ProjectFile:
    """A single file belonging to a project revision."""

    full_path: str | None
    sha256: str | None
    url: str | None


@dataclass
class ProjectDetail:
    """Detailed information about one revision of a project."""

    slug: str
    revision: int
    name: str | None = None
    description: str | None = None
    published_at: str | None = None
    author: str | None = None
    version: str | None = None
    files: list[ProjectFile] = field(default_factory=list)


def _child(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


def _revision(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def build_summaries_url(base_url: str, search_query: str | None, limit: int, offset: int) -> str:
    """Build the URL for one page of project summaries."""
    endpoint = f"{base_url}/project-summaries"
    if search_query:
        escaped = quote(search_query, safe="")
        log.debug("Searching with ?search=%s&pageLength=%d&pageStart=%d", escaped, limit, offset)
        return f"{endpoint}?search={escaped}&pageLength={limit}&pageStart={offset}"
    return f"{endpoint}?pageLength={limit}&pageStart={offset}"


def parse_project_summaries(data: Any) -> list[Project]:
    """Turn a decoded project-summaries response into projects.

    Anything other than a JSON array yields an empty list.
    """
    if not isinstance(data, list):
        return []
    return [
        Project(
            name=get_json_string(item, "name"),
            slug=get_json_string(item, "slug"),
            description=get_json_string(item, "description"),
            project_url=get_json_string(item, "project_url"),
            icon_url=get_json_string(_child(_child(item, "icon_map"), "64x64"), "url"),
            revision=_revision(_child(item, "revision")),
        )
        for item in data
    ]


def parse_project_details(data: Any, slug: str, revision: int) -> ProjectDetail:
    """Turn a decoded project-revision response into a ProjectDetail."""
    details = ProjectDetail(slug=slug, revision=revision)
    version_obj = _child(data, "version")
    if version_obj is None:
        return details
    metadata = _child(version_obj, "app_metadata")
    details.name = get_json_string(metadata, "name")
    details.description = get_json_string(metadata, "description")
    details.author = get_json_string(metadata, "author")
    details.version = get_json_string(metadata, "version")
    details.published_at = get_json_string(version_obj, "published_at")
    files = _child(version_obj, "files")
    if isinstance(files, list):
        details.files = [
            ProjectFile(
                full_path=get_json_string(entry, "full_path"),
                sha256=get_json_string(entry, "sha256"),
                url=get_json_string(entry, "url"),
            )
            for entry in files
        ]
    return details


class BadgeHubClient:
    """Talks to a BadgeHub API and installs project files locally."""

    def __init__(
        self,
        base_url: str,
        installation_dir: str | Path = DEFAULT_INSTALLATION_DIR,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.installation_dir = Path(installation_dir)
        self._session = session if session is not None else requests.Session()

    def _get_json(self, url: str) -> Any:
        try:
            response = self._session.get(
                url,
                headers={"User-Agent": USER_AGENT},
                timeout=REQUEST_TIMEOUT,
                allow_redirects=False,
            )
        except requests.RequestException as exc:
            raise BadgeHubError(f"request to {url} failed: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise BadgeHubError(f"invalid JSON received from {url}") from exc

    def get_applications(
        self, search_query: str | None = None, limit: int = 20, offset: int = 0
    ) -> list[Project]:
        """Fetch one page of project summaries, optionally filtered by a search."""
        url = build_summaries_url(self.base_url, search_query, limit, offset)
        return parse_project_summaries(self._get_json(url))

    def get_project_details(self, slug: str, revision: int) -> ProjectDetail:
        """Fetch the details of one project revision."""
        if not slug:
            raise BadgeHubError("a project slug is required")
        url = f"{self.base_url}/projects/{slug}/rev{revision}"
        return parse_project_details(self._get_json(url), slug, revision)

    def download_icon(self, icon_url: str | None) -> bytes | None:
        """Download an icon into memory; None when no URL is given."""
        if not icon_url:
            return None
        try:
            response = self._session.get(icon_url, timeout=REQUEST_TIMEOUT, allow_redirects=False)
        except requests.RequestException as exc:
            raise BadgeHubError(f"icon download from {icon_url} failed: {exc}") from exc
        if response.status_code != 200:
            raise BadgeHubError(
                f"icon download from {icon_url} failed: HTTP status {response.status_code}"
            )
        return response.content

    def download_project_file(self, file_info: ProjectFile, project_slug: str) -> Path:
        """Download one project file below the installation directory.

        Returns the path written. A response other than 200 removes the file.
        """
        url = file_info.url
        if not url or not project_slug:
            raise BadgeHubError("a file URL and a project slug are required")
        local_path = self.installation_dir / project_slug / (file_info.full_path or "")
        ensure_dir_exists(local_path.as_posix())
        try:
            handle = open(local_path, "wb")
        except OSError as exc:
            raise BadgeHubError(f"failed to open file for writing: {local_path}") from exc
        with handle:
            try:
                with self._session.get(
                    url, stream=True, timeout=REQUEST_TIMEOUT, allow_redirects=False
                ) as response:
                    status = response.status_code
                    for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                        handle.write(chunk)
            except requests.RequestException as exc:
                raise BadgeHubError(f"download of {url} failed: {exc}") from exc
        if status != 200:
            local_path.unlink(missing_ok=True)
            raise BadgeHubError(f"download failed for {url}: HTTP status {status}")
        return local_path