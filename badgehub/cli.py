"""Command-line front end for browsing and installing BadgeHub projects."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from .client import (
    DEFAULT_INSTALLATION_DIR,
    BadgeHubClient,
    BadgeHubError,
    Project,
    ProjectDetail,
)
from .installer import InstallError, install_project
from .pager import ITEMS_PER_PAGE, Page, Pager

ENV_BASE_URL = "BADGEHUB_URL"
NO_APPLICATIONS = "No applications found."
DETAILS_FAILED = "Failed to load project details."


def format_card(project: Project) -> str:
    """Render one project summary as its title line and description line."""
    return f"{project.name or ''}\n    {project.description or ''}"


def format_list(projects: Sequence[Project]) -> str:
    """Render a page of projects as numbered cards."""
    if not projects:
        return NO_APPLICATIONS
    return "\n".join(
        f"{number}. {format_card(project)}" for number, project in enumerate(projects, start=1)
    )


def format_detail(details: ProjectDetail) -> str:
    """Render the detail view of one project revision."""
    return "\n".join(
        [
            f"Name: {details.name or ''} (rev {details.revision})",
            f"Description: {details.description or ''}",
            f"Published: {details.published_at or ''}",
        ]
    )


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="badgehub", description="Browse and install projects from a BadgeHub catalogue."
    )
    parser.add_argument(
        "--base-url",
        default=os.environ.get(ENV_BASE_URL),
        help=f"API base URL (defaults to ${ENV_BASE_URL})",
    )
    parser.add_argument(
        "--dir",
        dest="installation_dir",
        default=DEFAULT_INSTALLATION_DIR,
        help="directory that projects are installed into",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="show one page of projects")
    list_cmd.add_argument("--search", default="", help="search query")
    list_cmd.add_argument("--page", type=_positive_int, default=1, help="page number")

    for name, text in (("show", "show project details"), ("install", "install a project")):
        cmd = commands.add_parser(name, help=text)
        cmd.add_argument("slug")
        cmd.add_argument("revision", type=int)

    browse_cmd = commands.add_parser("browse", help="page through projects interactively")
    browse_cmd.add_argument("--search", default="", help="initial search query")
    return parser


def _print_page(page: Page, out: TextIO) -> None:
    print(format_list(page.projects), file=out)
    print(page.label, file=out)


def _show(client: BadgeHubClient, slug: str, revision: int, out: TextIO) -> int:
    try:
        details = client.get_project_details(slug, revision)
    except BadgeHubError:
        print(DETAILS_FAILED, file=sys.stderr)
        return 1
    print(format_detail(details), file=out)
    return 0


def _install(client: BadgeHubClient, slug: str, revision: int, out: TextIO) -> int:
    try:
        details = client.get_project_details(slug, revision)
    except BadgeHubError:
        print(DETAILS_FAILED, file=sys.stderr)
        return 1
    try:
        install_project(client, details, lambda message: print(message, file=out))
    except InstallError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _selected(page: Page | None, text: str) -> Project | None:
    if page is None or not text.isdigit():
        return None
    number = int(text)
    if 1 <= number <= len(page.projects):
        return page.projects[number - 1]
    return None


def _browse(client: BadgeHubClient, pager: Pager, query: str, inp: TextIO, out: TextIO) -> int:
    """Interactive loop: n/p page, /text searches, N shows, i N installs, q quits."""
    try:
        page = pager.new_search(query)
    except BadgeHubError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if page is not None:
        _print_page(page, out)

    for line in inp:
        command = line.strip()
        if command in ("q", "quit"):
            break
        try:
            if command == "n":
                page = pager.next_page() or page
                _print_page(page, out)
            elif command == "p":
                page = pager.previous_page() or page
                _print_page(page, out)
            elif command.startswith("/"):
                page = pager.new_search(command[1:]) or page
                _print_page(page, out)
            elif command.startswith("i "):
                project = _selected(page, command[2:].strip())
                if project is None or not project.slug:
                    print("No such project.", file=out)
                else:
                    _install(client, project.slug, project.revision, out)
            elif (project := _selected(page, command)) is not None:
                if project.slug:
                    _show(client, project.slug, project.revision, out)
                else:
                    print(DETAILS_FAILED, file=out)
            elif command:
                print("Commands: n, p, /query, <number>, i <number>, q", file=out)
        except BadgeHubError as exc:
            print(f"Error: {exc}", file=sys.stderr)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.base_url:
        parser.error(f"no API base URL given; use --base-url or set {ENV_BASE_URL}")

    client = BadgeHubClient(args.base_url, installation_dir=args.installation_dir)
    out = sys.stdout
    pager = Pager(
        lambda query, limit, offset: client.get_applications(query, limit, offset),
        ITEMS_PER_PAGE,
    )

    if args.command == "list":
        pager.query = args.search
        try:
            page = pager.fetch_page((args.page - 1) * pager.page_size)
        except BadgeHubError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        if page is not None:
            _print_page(page, out)
        return 0
    if args.command == "show":
        return _show(client, args.slug, args.revision, out)
    if args.command == "install":
        return _install(client, args.slug, args.revision, out)
    return _browse(client, pager, args.search, sys.stdin, out)


if __name__ == "__main__":
    sys.exit(main())