import os
import stat
from pathlib import Path
from ..domain.interfaces import IAttributeWriter

class PosixAttributeWriter(IAttributeWriter):
    """
    POSIX has no attribute bits, so 'normal' means:
    - owner can read and write (no read-only file)
    - no BSD/macOS file flags (UF_HIDDEN, UF_IMMUTABLE, ...) where the platform has them
    """

    OWNER_RW = stat.S_IRUSR | stat.S_IWUSR

    def reset(self, path: Path) -> None:
        st = os.stat(path)

        # Flags first: chmod on an immutable file fails
        if getattr(st, "st_flags", 0) and hasattr(os, "chflags"):
            os.chflags(path, 0)

        mode = stat.S_IMODE(st.st_mode)
        if mode & self.OWNER_RW != self.OWNER_RW:
            os.chmod(path, mode | self.OWNER_RW)

    def is_normal(self, path: Path) -> bool:
        st = os.stat(path)
        if getattr(st, "st_flags", 0):
            return False
        return stat.S_IMODE(st.st_mode) & self.OWNER_RW == self.OWNER_RW

class WindowsAttributeWriter(IAttributeWriter):
    """
    Calls SetFileAttributesW with FILE_ATTRIBUTE_NORMAL, which clears
    read-only, hidden, system and archive in one call.
    """

    FILE_ATTRIBUTE_NORMAL = 0x80
    SPECIAL_ATTRIBUTES = (
        stat.FILE_ATTRIBUTE_READONLY
        | stat.FILE_ATTRIBUTE_HIDDEN
        | stat.FILE_ATTRIBUTE_SYSTEM
        | stat.FILE_ATTRIBUTE_ARCHIVE
    )

    def __init__(self):
        import ctypes
        from ctypes import wintypes

        self._ctypes = ctypes
        self._kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        self._kernel32.SetFileAttributesW.argtypes = [wintypes.LPCWSTR, wintypes.DWORD]
        self._kernel32.SetFileAttributesW.restype = wintypes.BOOL

    def reset(self, path: Path) -> None:
        if not self._kernel32.SetFileAttributesW(str(path), self.FILE_ATTRIBUTE_NORMAL):
            error = self._ctypes.WinError(self._ctypes.get_last_error())
            error.filename = str(path)
            raise error

    def is_normal(self, path: Path) -> bool:
        return os.stat(path).st_file_attributes & self.SPECIAL_ATTRIBUTES == 0

def get_attribute_writer() -> IAttributeWriter:
    """Picks the writer for the running platform."""
    if os.name == "nt":
        return WindowsAttributeWriter()
    return PosixAttributeWriter()
