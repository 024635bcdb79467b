import pytest


@pytest.fixture
def status_table():
    """Emoji status table as a formatter pads it (by character count)."""
    return (
        "| Status  | Meaning     |\n"
        "| ------  | ----------- |\n"
        "| ✅      | Complete    |\n"
        "| 🚧      | In Progress |\n"
        "| ❌      | Failed      |"
    )


@pytest.fixture
def markdown_tree(tmp_path):
    """A small project layout with markdown files in and out of scope."""
    table = "| Status | Meaning |\n| ------ | ------- |\n| ✅     | Done    |\n"
    (tmp_path / "README.md").write_text(table, encoding="utf-8")
    (tmp_path / "notes.txt").write_text(table, encoding="utf-8")
    docs = tmp_path / "docs"
    (docs / "guide").mkdir(parents=True)
    (docs / "index.mdx").write_text(table, encoding="utf-8")
    (docs / "guide" / "plain.md").write_text("# Plain\n", encoding="utf-8")
    (docs / ".hidden").mkdir()
    (docs / ".hidden" / "secret.md").write_text(table, encoding="utf-8")
    (docs / "node_modules").mkdir()
    (docs / "node_modules" / "dep.md").write_text(table, encoding="utf-8")
    return tmp_path
