"""Forward-only JSON emitter tracking brace and comma bookkeeping."""

from __future__ import annotations

import enum
from io import StringIO

from odf2json._errors import ERR_MSG_EMITTER_STATE, EmitterStateError
from odf2json._utils import escape_json_string


class EmitterState(enum.StrEnum):
    AT_FILE_START = "at_file_start"
    IN_FILE_NO_SECTION = "in_file_no_section"
    IN_SECTION = "in_section"
    FILE_CLOSED = "file_closed"


class JsonEmitter:
    """Writes one file's JSON fragment into a StringIO buffer.

    The fragment is ``"<file>":{...}`` where the object holds top-level
    entries and/or section objects. Every entry and section is preceded by a
    comma unless it is the first thing written into its scope.
    """

    def __init__(self) -> None:
        self._w = StringIO()
        self._state = EmitterState.AT_FILE_START
        self._file_entries = 0
        self._section_entries = 0

    @property
    def result(self) -> str:
        return self._w.getvalue()

    @property
    def state(self) -> EmitterState:
        return self._state

    @property
    def entries_in_scope(self) -> int:
        if self._state is EmitterState.IN_SECTION:
            return self._section_entries
        return self._file_entries

    def _require(self, *states: EmitterState) -> None:
        if self._state not in states:
            raise EmitterStateError(
                ERR_MSG_EMITTER_STATE,
                f"state {self._state} not in {', '.join(states)}",
            )

    def _write_key(self, key: str) -> None:
        self._w.write('"')
        self._w.write(escape_json_string(key))
        self._w.write('":')

    def open_file(self, name: str) -> None:
        self._require(EmitterState.AT_FILE_START)
        self._write_key(name)
        self._w.write("{")
        self._state = EmitterState.IN_FILE_NO_SECTION

    def open_section(self, name: str) -> None:
        """Open a section object, closing the current one first."""
        self._require(EmitterState.IN_FILE_NO_SECTION, EmitterState.IN_SECTION)
        if self._state is EmitterState.IN_SECTION:
            self._w.write("}")
        if self._file_entries > 0:
            self._w.write(",")
        self._write_key(name)
        self._w.write("{")
        self._file_entries += 1
        self._section_entries = 0
        self._state = EmitterState.IN_SECTION

    def write_entry(self, key: str, value: str) -> None:
        self._require(EmitterState.IN_FILE_NO_SECTION, EmitterState.IN_SECTION)
        if self.entries_in_scope > 0:
            self._w.write(",")
        self._write_key(key)
        self._w.write('"')
        self._w.write(escape_json_string(value))
        self._w.write('"')
        if self._state is EmitterState.IN_SECTION:
            self._section_entries += 1
        else:
            self._file_entries += 1

    def close_file(self, is_last: bool) -> None:
        """Close any open section and the file object.

        A trailing comma is written unless this is the last file of a batch.
        """
        self._require(EmitterState.IN_FILE_NO_SECTION, EmitterState.IN_SECTION)
        if self._state is EmitterState.IN_SECTION:
            self._w.write("}")
        self._w.write("}" if is_last else "},")
        self._state = EmitterState.FILE_CLOSED
