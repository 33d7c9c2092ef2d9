import io

import pytest
import responses
from responses import matchers

from badgehub.cli import format_card, format_detail, format_list, main
from badgehub.client import Project, ProjectDetail

BASE = "http://badgehub.test/api/v3"
SUMMARIES = f"{BASE}/project-summaries"


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def _project(name, slug, revision=1):
    return {
        "name": name,
        "slug": slug,
        "description": f"{name} description",
        "project_url": f"http://badgehub.test/{slug}",
        "icon_map": {"64x64": {"url": f"http://badgehub.test/{slug}.png"}},
        "revision": revision,
    }


def _detail_json(file_url):
    return {
        "version": {
            "published_at": "2024-01-02",
            "app_metadata": {
                "name": "Demo",
                "description": "A demo app",
                "author": "someone",
                "version": "1.0",
            },
            "files": [{"full_path": "main.py", "sha256": "abc", "url": file_url}],
        }
    }


def test_format_list_empty():
    assert format_list([]) == "No applications found."


def test_format_card_contains_name_and_description():
    card = format_card(Project("Snake", "snake", "A game", None, None, 2))
    lines = card.splitlines()
    assert lines[0] == "Snake"
    assert lines[1].strip() == "A game"


def test_format_list_numbers_cards():
    projects = [
        Project("One", "one", "first", None, None),
        Project("Two", "two", "second", None, None),
    ]
    text = format_list(projects)
    assert text.startswith("1. One")
    assert "\n2. Two" in text


def test_format_detail():
    details = ProjectDetail(
        slug="demo", revision=3, name="Demo", description="Desc", published_at="2024"
    )
    assert format_detail(details).splitlines() == [
        "Name: Demo (rev 3)",
        "Description: Desc",
        "Published: 2024",
    ]


def test_list_prints_page(capsys, mocked):
    mocked.add(
        responses.GET,
        SUMMARIES,
        json=[_project("Alpha", "alpha"), _project("Beta", "beta")],
        match=[matchers.query_param_matcher({"pageLength": "7", "pageStart": "0"})],
    )
    assert main(["--base-url", BASE, "list"]) == 0
    out = capsys.readouterr().out
    assert "1. Alpha" in out
    assert "2. Beta" in out
    assert "Page 1 / 1" in out


def test_list_second_page_with_search(capsys, mocked):
    mocked.add(
        responses.GET,
        SUMMARIES,
        json=[],
        match=[
            matchers.query_param_matcher(
                {"search": "snake", "pageLength": "7", "pageStart": "7"}
            )
        ],
    )
    assert main(["--base-url", BASE, "list", "--search", "snake", "--page", "2"]) == 0
    out = capsys.readouterr().out
    assert "No applications found." in out
    assert "Page 2 / 2" in out


def test_show_prints_details(capsys, mocked):
    mocked.add(responses.GET, f"{BASE}/projects/demo/rev2", json=_detail_json("http://x.test/f"))
    assert main(["--base-url", BASE, "show", "demo", "2"]) == 0
    out = capsys.readouterr().out
    assert "Name: Demo (rev 2)" in out
    assert "Published: 2024-01-02" in out


def test_show_failure(capsys, mocked):
    mocked.add(responses.GET, f"{BASE}/projects/demo/rev2", body="oops", status=500)
    assert main(["--base-url", BASE, "show", "demo", "2"]) == 1
    assert "Failed to load project details." in capsys.readouterr().err


def test_install_writes_files(tmp_path, capsys, mocked):
    file_url = "http://files.test/main.py"
    mocked.add(responses.GET, f"{BASE}/projects/demo/rev1", json=_detail_json(file_url))
    mocked.add(responses.GET, file_url, body=b"print('hi')\n")
    target = tmp_path / "install"
    status = main(["--base-url", BASE, "--dir", str(target), "install", "demo", "1"])
    assert status == 0
    assert (target / "demo" / "main.py").read_bytes() == b"print('hi')\n"
    assert "Installation complete!" in capsys.readouterr().out


def test_install_failed_download(tmp_path, capsys, mocked):
    file_url = "http://files.test/main.py"
    mocked.add(responses.GET, f"{BASE}/projects/demo/rev1", json=_detail_json(file_url))
    mocked.add(responses.GET, file_url, status=404)
    target = tmp_path / "install"
    status = main(["--base-url", BASE, "--dir", str(target), "install", "demo", "1"])
    assert status == 1
    assert "Error: Failed to download main.py" in capsys.readouterr().err
    assert not (target / "demo" / "main.py").exists()


def test_missing_base_url_is_usage_error(monkeypatch):
    monkeypatch.delenv("BADGEHUB_URL", raising=False)
    with pytest.raises(SystemExit) as info:
        main(["list"])
    assert info.value.code == 2


def test_base_url_from_environment(monkeypatch, capsys, mocked):
    monkeypatch.setenv("BADGEHUB_URL", BASE)
    mocked.add(responses.GET, SUMMARIES, json=[_project("Gamma", "gamma")])
    assert main(["list"]) == 0
    assert "1. Gamma" in capsys.readouterr().out


def test_browse_pages_and_shows(monkeypatch, capsys, mocked):
    full_page = [_project(f"App{n}", f"app{n}") for n in range(7)]
    mocked.add(
        responses.GET,
        SUMMARIES,
        json=full_page,
        match=[matchers.query_param_matcher({"pageLength": "7", "pageStart": "0"})],
    )
    mocked.add(
        responses.GET,
        SUMMARIES,
        json=[_project("Last", "last", 4)],
        match=[matchers.query_param_matcher({"pageLength": "7", "pageStart": "7"})],
    )
    mocked.add(responses.GET, f"{BASE}/projects/last/rev4", json=_detail_json("http://x.test/f"))
    monkeypatch.setattr("sys.stdin", io.StringIO("n\n1\nq\n"))
    assert main(["--base-url", BASE, "browse"]) == 0
    out = capsys.readouterr().out
    assert "Page 1 / ?" in out
    assert "Page 2 / 2" in out
    assert "Name: Demo (rev 4)" in out