import os
import pytest
from readonly_cleaner.features.normalizer.data.file_walker import LocalFileWalker
from readonly_cleaner.features.normalizer.domain.errors import EnumerationError

def test_walker_yields_every_file_and_no_directories(project_tree):
    found = list(LocalFileWalker().walk(project_tree))
    relative = sorted(str(p.relative_to(project_tree)).replace(os.sep, "/") for p in found)

    assert relative == [
        ".editorconfig",
        ".git/HEAD",
        "App.sln",
        "bin/Debug/App.dll",
        "src/Program.cs",
    ]

def test_walker_on_vanished_root_raises_enumeration_error(tmp_path):
    gone = tmp_path / "gone"

    with pytest.raises(EnumerationError) as exc_info:
        list(LocalFileWalker().walk(gone))

    assert exc_info.value.directory == gone
    assert exc_info.value.report.total == 0

def test_walker_is_lazy(tmp_path):
    """Nothing is listed until the caller starts iterating."""
    walker = LocalFileWalker().walk(tmp_path / "gone")
    # Creating the generator alone must not raise
    with pytest.raises(EnumerationError):
        next(walker)

@pytest.mark.skipif(os.name == "nt", reason="Creating symlinks needs extra privileges on Windows")
def test_walker_does_not_descend_into_symlinked_directories(tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "elsewhere.txt").write_text("not ours")

    root = tmp_path / "root"
    root.mkdir()
    (root / "mine.txt").write_text("ours")
    (root / "link_to_outside").symlink_to(outside, target_is_directory=True)

    names = [p.name for p in LocalFileWalker().walk(root)]

    assert names == ["mine.txt"]
