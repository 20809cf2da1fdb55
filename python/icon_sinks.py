#!/usr/bin/env python3
"""
Output sinks for rendered icons.

A sink stores renditions either as loose files in a fresh directory or as
entries of a single zip archive. Both variants share one interface:

    with create_sink(archive).open(destination) as sink:
        sink.write("icon_48.png", data)

Leaving the `with` block closes the sink, including after an error.
"""

import hashlib
import sys
import zipfile
from pathlib import Path

from constants import OUTPUT_PREFIX, TIMESTAMP_FORMAT, ARCHIVE_SUFFIX, ARCHIVE_ENTRY_DATE
from errors import AppIconizerError, SinkOpenError, SinkWriteError, FinalizeError


def output_name(now):
    """Base name shared by the output directory and archive of one run."""
    return f"{OUTPUT_PREFIX} {now.strftime(TIMESTAMP_FORMAT)}"


def _ensure_parent(destination):
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SinkOpenError(f"Cannot create target directory: {destination.parent}") from e


class Sink:
    """Common open/write/close lifecycle for icon outputs."""

    suffix = ""

    def __init__(self):
        self.destination = None
        self.written = []
        self.is_open = False

    def destination_for(self, base_dir, now):
        return Path(base_dir) / (output_name(now) + self.suffix)

    def open(self, destination):
        if self.is_open:
            raise SinkOpenError(f"Sink is already open at {self.destination}")
        self.destination = Path(destination)
        self._open()
        self.is_open = True
        return self

    def write(self, filename, data):
        if not self.is_open:
            raise SinkWriteError(f"Cannot write {filename}: sink is not open")
        if self._write(filename, data):
            self.written.append(filename)

    def close(self):
        if not self.is_open:
            return
        self.is_open = False
        self._close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.close()
            return False

        # Keep the original error; the close is best-effort
        try:
            self.close()
        except AppIconizerError as e:
            print(f"Warning: {e}", file=sys.stderr)
        return False

    def _open(self):
        raise NotImplementedError

    def _write(self, filename, data):
        raise NotImplementedError

    def _close(self):
        raise NotImplementedError


class DirectorySink(Sink):
    """Writes one PNG file per rendition into a new directory."""

    def _open(self):
        _ensure_parent(self.destination)
        try:
            self.destination.mkdir()
        except FileExistsError as e:
            raise SinkOpenError(f"Output already exists: {self.destination}") from e
        except OSError as e:
            raise SinkOpenError(f"Cannot create output directory: {self.destination}") from e

    def _write(self, filename, data):
        file_path = self.destination / filename
        try:
            file_path.write_bytes(data)
        except OSError as e:
            raise SinkWriteError(f"Cannot write {file_path}") from e
        # Duplicate widths overwrite the same file and are listed once
        return filename not in self.written

    def _close(self):
        pass


class ArchiveSink(Sink):
    """Writes one deflated zip entry per rendition into a single archive."""

    suffix = ARCHIVE_SUFFIX

    def __init__(self):
        super().__init__()
        self._zip = None
        self._digests = {}

    def _open(self):
        _ensure_parent(self.destination)
        try:
            # Mode "x" refuses to replace an archive from an earlier run
            self._zip = zipfile.ZipFile(self.destination, "x", compression=zipfile.ZIP_DEFLATED)
        except FileExistsError as e:
            raise SinkOpenError(f"Output already exists: {self.destination}") from e
        except OSError as e:
            raise SinkOpenError(f"Cannot create archive: {self.destination}") from e

    def _write(self, filename, data):
        digest = hashlib.sha256(data).hexdigest()
        previous = self._digests.get(filename)
        if previous == digest:
            return False
        if previous is not None:
            raise SinkWriteError(f"Archive already contains a different {filename}")

        info = zipfile.ZipInfo(filename, date_time=ARCHIVE_ENTRY_DATE)
        info.compress_type = zipfile.ZIP_DEFLATED
        info.external_attr = 0o644 << 16
        try:
            self._zip.writestr(info, data)
        except (OSError, ValueError, zipfile.BadZipFile) as e:
            raise SinkWriteError(f"Cannot add {filename} to {self.destination}") from e

        self._digests[filename] = digest
        return True

    def _close(self):
        archive, self._zip = self._zip, None
        try:
            archive.close()
        except (OSError, ValueError) as e:
            raise FinalizeError(f"Cannot finalize archive: {self.destination}") from e


def create_sink(archive=False):
    """Pick the sink variant for the requested packaging mode."""
    if archive:
        return ArchiveSink()
    return DirectorySink()
