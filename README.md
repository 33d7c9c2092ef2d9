# badgehub

A small client for a BadgeHub application catalogue. It lists and
searches published projects page by page, shows a project's details and
installs a project's files into a local directory.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `badgehub` command. It needs the
base URL of the catalogue's API, given with `--base-url` or through the
`BADGEHUB_URL` environment variable. The global options come before the
subcommand:

```
badgehub [--base-url URL] [--dir DIRECTORY] COMMAND ...
```

- `--dir` sets the installation directory (default `installation_dir`).

Commands:

- `badgehub list [--search TEXT] [--page N]` prints one page of seven
  projects as numbered cards (name, then description), followed by a
  `Page N / M` line. The total is shown as `?` until a page shorter than
  a full page has been seen. An empty page prints
  `No applications found.`
- `badgehub show SLUG REVISION` prints the name and revision, the
  description and the publication date of one project revision.
- `badgehub install SLUG REVISION` downloads every file of that revision,
  printing progress as it goes.
- `badgehub browse [--search TEXT]` pages through the catalogue
  interactively, reading commands from standard input:
  `n` next page, `p` previous page, `/text` new search, a card number to
  show that project, `i <number>` to install it, `q` to quit.

Example:

```
export BADGEHUB_URL=https://badgehub.example.com/api/v3
badgehub list --search clock
badgehub install my-clock 3
```

Installed projects are written below `<dir>/<slug>/`, each file at its
path inside the project; missing directories are created on the way. A
download that answers with a status other than 200 leaves no file
behind and stops the installation. Commands exit with status 1 when the
details cannot be loaded or the installation fails.

## Using it from Python

```python
from badgehub.client import BadgeHubClient, BadgeHubError
from badgehub.installer import install_project, InstallError

client = BadgeHubClient("https://badgehub.example.com/api/v3")

projects = client.get_applications("clock", 20, 0)
for project in projects:
    print(project.slug, project.revision, project.name)

details = client.get_project_details(projects[0].slug, projects[0].revision)
print(details.name, details.published_at)
for file in details.files:
    print(file.full_path)

paths = install_project(client, details, print)
```

The main pieces:

- `badgehub.client` — `BadgeHubClient(base_url, installation_dir,
  session)` talks to the catalogue: `get_applications`,
  `get_project_details`, `download_icon` (returns the icon's bytes, or
  `None` when no URL is given) and `download_project_file` (returns the
  path written). Results are `Project`, `ProjectDetail` and
  `ProjectFile` dataclasses. The helpers `build_summaries_url`,
  `parse_project_summaries` and `parse_project_details` work on plain
  data without the network. Network errors, invalid JSON and failed
  downloads raise `BadgeHubError`.
- `badgehub.pager` — `Pager(fetch, page_size)` keeps track of the
  current offset, the search query, the known page count and whether the
  end of the list has been reached; `fetch_page`, `next_page`,
  `previous_page`, `new_search` and `page_label` drive it. Each fetch
  yields a `Page` with its projects, number, total and the card to
  focus; `Page.label` gives its `Page N / M` text.
- `badgehub.navigation` — `card_key_action` decides what a `Key` pressed
  on a card does (move focus, change page, or start a search), returning
  a `NavAction` of some `NavKind`; `detail_key_focus` moves between the
  `back` and `install` buttons of a detail view.
- `badgehub.installer` — `install_project` creates the installation
  directories, downloads every file of a project, reports progress
  through a callback and returns the paths written. It raises
  `InstallError` when a directory cannot be created or a download fails.
- `badgehub.utils` — `get_json_string` and `ensure_dir_exists`.
- `badgehub.cli` — `format_card`, `format_list` and `format_detail`
  render projects as text; `main` is the entry point of the command.

## What it does not do

- There is no graphical window: the catalogue is shown as text only,
  and project icons are not displayed. `download_icon` only fetches an
  icon's bytes for the caller to use.
- The `sha256` of a project file is read from the catalogue but
  downloaded files are not checked against it.
- Installed projects cannot be listed or removed through the package.