"""Sequential tar archive reading."""

from __future__ import annotations

import enum
import tarfile
import zlib
from typing import BinaryIO, Iterator, Optional


class TarlocError(RuntimeError):
    """Base class for failures that abort a tarloc run."""


class StreamOpenError(TarlocError):
    """Raised when the input cannot be opened as a byte stream."""


class FormatError(TarlocError):
    """Raised when the byte stream is not a readable tar archive."""


class EntryReadError(TarlocError):
    """Raised when a single archive entry cannot be read."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class DecodeError(EntryReadError):
    """Raised when an entry's stored path is not valid UTF-8."""


class CorruptHeaderError(EntryReadError):
    """Raised when an entry header carries a malformed field."""


class ReadError(EntryReadError):
    """Raised when an entry's content cannot be read."""


_STREAM_ERRORS = (tarfile.TarError, EOFError, OSError, zlib.error)


class _StrictTarInfo(tarfile.TarInfo):
    """TarInfo that refuses to read a damaged header as the end of the archive.

    tarfile only reports a bad checksum or a partial header block for the first
    member; later ones end iteration quietly. Only all-zero and missing blocks
    are accepted here as the end marker.
    """

    @classmethod
    def fromtarfile(cls, tarfile_obj):
        try:
            return super().fromtarfile(tarfile_obj)
        except (tarfile.InvalidHeaderError, tarfile.TruncatedHeaderError) as exc:
            if tarfile_obj.offset == 0:
                raise
            raise tarfile.SubsequentHeaderError(
                f"{exc} at offset {tarfile_obj.offset}"
            ) from exc


class EntryKind(enum.Enum):
    """Archive entry types relevant to counting."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    HARDLINK = "hardlink"
    OTHER = "other"


class ArchiveEntry:
    """One member of a tar stream.

    Content is only readable while the owning iterator is positioned on this
    entry; advancing the iterator invalidates it.
    """

    def __init__(self, archive: tarfile.TarFile, member: tarfile.TarInfo, ordinal: int) -> None:
        self._archive = archive
        self._member = member
        self._ordinal = ordinal
        self._expired = False

    @property
    def ordinal(self) -> int:
        return self._ordinal

    def entry_type(self) -> EntryKind:
        member = self._member
        if member.isreg():
            return EntryKind.FILE
        if member.isdir():
            return EntryKind.DIRECTORY
        if member.issym():
            return EntryKind.SYMLINK
        if member.islnk():
            return EntryKind.HARDLINK
        return EntryKind.OTHER

    def is_file(self) -> bool:
        return self.entry_type() is EntryKind.FILE

    def path(self) -> str:
        name = self._member.name
        try:
            name.encode("utf-8")
        except UnicodeEncodeError as exc:
            lossy = name.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")
            raise DecodeError(
                f"Entry #{self._ordinal} has an undecodable path: {lossy!r}", path=lossy
            ) from exc
        return name

    def declared_size(self) -> int:
        """Return the size recorded in the header.

        tarfile validates numeric header fields while parsing, so a damaged size
        in a real archive fails earlier, as the EntryReadError raised when
        advancing to that header. This guards members built by other means.
        """
        size = self._member.size
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise CorruptHeaderError(
                f"Entry #{self._ordinal} has a corrupt size field: {size!r}",
                path=self._member.name,
            )
        return size

    def read_to_end(self) -> bytes:
        if self._expired:
            raise ReadError(
                f"Entry #{self._ordinal} is no longer readable; the archive has moved past it",
                path=self._member.name,
            )
        try:
            handle = self._archive.extractfile(self._member)
            if handle is None:
                raise ReadError(
                    f"Entry #{self._ordinal} has no readable content", path=self._member.name
                )
            with handle:
                return handle.read()
        except ReadError:
            raise
        except _STREAM_ERRORS as exc:
            raise ReadError(
                f"Failed to read entry #{self._ordinal} ({self._member.name}): {exc}",
                path=self._member.name,
            ) from exc

    def _expire(self) -> None:
        self._expired = True


class ArchiveReader:
    """Opens a byte stream as a forward-only tar archive.

    Compressed tarballs (gzip, bzip2, xz) are decoded transparently.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def entries(self) -> Iterator[ArchiveEntry]:
        """Yield archive entries lazily in archival order.

        Raises FormatError before the first entry when the stream is not a tar
        archive, and EntryReadError when advancing onto a damaged or truncated
        header.
        """
        try:
            archive = tarfile.open(
                fileobj=self._stream,
                mode="r|*",
                tarinfo=_StrictTarInfo,
                encoding="utf-8",
                errors="surrogateescape",
            )
        except _STREAM_ERRORS as exc:
            raise FormatError(f"Input is not a readable tar archive: {exc}") from exc

        with archive:
            members = iter(archive)
            ordinal = 0
            previous: Optional[ArchiveEntry] = None
            while True:
                try:
                    member = next(members)
                except StopIteration:
                    break
                except _STREAM_ERRORS as exc:
                    raise EntryReadError(
                        f"Failed to read the header after entry #{ordinal}: {exc}"
                    ) from exc
                finally:
                    if previous is not None:
                        previous._expire()
                ordinal += 1
                previous = ArchiveEntry(archive, member, ordinal)
                yield previous


__all__ = [
    "ArchiveEntry",
    "ArchiveReader",
    "CorruptHeaderError",
    "DecodeError",
    "EntryKind",
    "EntryReadError",
    "FormatError",
    "ReadError",
    "StreamOpenError",
    "TarlocError",
]
