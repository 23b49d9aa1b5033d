from softbreaks.utils.discover import find_documents
from softbreaks.utils.gitignore import get_gitignore


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("x")


def test_finds_markdown_and_text_files(tmp_path):
    for rel in ["README.md", "docs/guide.markdown", "docs/notes.txt", "src/main.py", "docs/deep/ref.MD"]:
        _touch(tmp_path / rel)

    found = find_documents(str(tmp_path), get_gitignore(str(tmp_path)))

    assert found == ["README.md", "docs/deep/ref.MD", "docs/guide.markdown", "docs/notes.txt"]


def test_respects_gitignore(tmp_path):
    (tmp_path / ".gitignore").write_text("build/\n/TODO.md\n*.draft.md\n")
    for rel in ["TODO.md", "docs/TODO.md", "build/out.md", "post.draft.md", "post.md", ".git/info.md"]:
        _touch(tmp_path / rel)

    found = find_documents(str(tmp_path), get_gitignore(str(tmp_path)))

    assert found == ["docs/TODO.md", "post.md"]


def test_custom_extensions(tmp_path):
    _touch(tmp_path / "a.md")
    _touch(tmp_path / "b.rst")
    spec = get_gitignore(str(tmp_path))
    assert find_documents(str(tmp_path), spec, extensions=["rst"]) == ["b.rst"]


def test_gitignore_found_in_parent_directory(tmp_path):
    (tmp_path / ".gitignore").write_text("*.md\n")
    sub = tmp_path / "sub"
    sub.mkdir()
    spec = get_gitignore(str(sub))
    assert spec.match_file("notes.md")
    assert spec.match_file(".git/")


def test_gitignore_accepts_a_file_path(tmp_path):
    (tmp_path / ".gitignore").write_text("*.log\n")
    doc = tmp_path / "doc.md"
    doc.write_text("x")
    assert get_gitignore(str(doc)).match_file("run.log")
