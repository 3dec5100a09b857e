import os
import stat
import pytest
from readonly_cleaner.features.normalizer.data.attribute_writer import (
    PosixAttributeWriter,
    WindowsAttributeWriter,
    get_attribute_writer,
)

posix_only = pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
windows_only = pytest.mark.skipif(os.name != "nt", reason="Windows file attributes")

def mode_of(path):
    return stat.S_IMODE(os.stat(path).st_mode)

@posix_only
def test_factory_picks_posix_writer():
    assert isinstance(get_attribute_writer(), PosixAttributeWriter)

@posix_only
def test_reset_adds_owner_write_and_keeps_other_bits(tmp_path):
    target = tmp_path / "script.sh"
    target.write_text("#!/bin/sh")
    target.chmod(0o555)

    PosixAttributeWriter().reset(target)

    assert mode_of(target) == 0o755

@posix_only
def test_reset_skips_chmod_when_already_normal(tmp_path, monkeypatch):
    target = tmp_path / "plain.txt"
    target.write_text("x")
    target.chmod(0o644)

    calls = []
    monkeypatch.setattr(os, "chmod", lambda *args, **kwargs: calls.append(args))

    PosixAttributeWriter().reset(target)

    assert calls == []

@posix_only
def test_is_normal_reflects_owner_write_bit(tmp_path):
    target = tmp_path / "doc.txt"
    target.write_text("x")
    writer = PosixAttributeWriter()

    target.chmod(0o444)
    assert not writer.is_normal(target)

    target.chmod(0o644)
    assert writer.is_normal(target)

@posix_only
def test_reset_missing_file_raises_os_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        PosixAttributeWriter().reset(tmp_path / "missing.txt")

@windows_only
def test_windows_reset_clears_read_only_and_hidden(tmp_path):
    import subprocess

    target = tmp_path / "hidden.txt"
    target.write_text("x")
    subprocess.run(["attrib", "+R", "+H", str(target)], check=True)

    writer = get_attribute_writer()
    assert isinstance(writer, WindowsAttributeWriter)
    assert not writer.is_normal(target)

    writer.reset(target)

    assert writer.is_normal(target)
