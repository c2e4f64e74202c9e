import pathlib

from payoff import __version__

CHANGELOG = pathlib.Path(__file__).resolve().parents[1] / "CHANGELOG.md"


def test_changelog_covers_current_version():
    lines = CHANGELOG.read_text(encoding="utf-8").splitlines()
    assert f"## {__version__}" in lines


def test_current_version_has_entries():
    lines = CHANGELOG.read_text(encoding="utf-8").splitlines()
    start = lines.index(f"## {__version__}") + 1
    section = []
    for line in lines[start:]:
        if line.startswith("## "):
            break
        section.append(line)
    assert any(line.startswith("- ") for line in section)
