"""JSON emitter state machine tests."""

import pytest

from odf2json._emitter import EmitterState, JsonEmitter
from odf2json._errors import EmitterStateError


class TestTransitions:
    def test_initial_state(self):
        assert JsonEmitter().state is EmitterState.AT_FILE_START

    def test_full_cycle(self):
        e = JsonEmitter()
        e.open_file("f")
        assert e.state is EmitterState.IN_FILE_NO_SECTION
        e.open_section("S")
        assert e.state is EmitterState.IN_SECTION
        e.close_file(is_last=True)
        assert e.state is EmitterState.FILE_CLOSED

    def test_entry_before_open_file(self):
        with pytest.raises(EmitterStateError):
            JsonEmitter().write_entry("k", "v")

    def test_section_before_open_file(self):
        with pytest.raises(EmitterStateError):
            JsonEmitter().open_section("S")

    def test_nothing_after_close(self):
        e = JsonEmitter()
        e.open_file("f")
        e.close_file(is_last=True)
        with pytest.raises(EmitterStateError):
            e.write_entry("k", "v")
        with pytest.raises(EmitterStateError):
            e.close_file(is_last=True)

    def test_open_file_twice(self):
        e = JsonEmitter()
        e.open_file("f")
        with pytest.raises(EmitterStateError):
            e.open_file("g")


class TestOutput:
    def test_empty_file(self):
        e = JsonEmitter()
        e.open_file("f")
        e.close_file(is_last=True)
        assert e.result == '"f":{}'

    def test_not_last_adds_comma(self):
        e = JsonEmitter()
        e.open_file("f")
        e.close_file(is_last=False)
        assert e.result == '"f":{},'

    def test_entries_without_section(self):
        e = JsonEmitter()
        e.open_file("f")
        e.write_entry("a", "1")
        e.write_entry("b", "2")
        e.close_file(is_last=True)
        assert e.result == '"f":{"a":"1","b":"2"}'

    def test_sections(self):
        e = JsonEmitter()
        e.open_file("f")
        e.open_section("S")
        e.write_entry("a", "1")
        e.open_section("T")
        e.write_entry("b", "2")
        e.write_entry("c", "3")
        e.close_file(is_last=True)
        assert e.result == '"f":{"S":{"a":"1"},"T":{"b":"2","c":"3"}}'

    def test_file_entries_then_section(self):
        e = JsonEmitter()
        e.open_file("f")
        e.write_entry("a", "1")
        e.open_section("S")
        e.close_file(is_last=True)
        assert e.result == '"f":{"a":"1","S":{}}'

    def test_entry_count_resets_per_section(self):
        e = JsonEmitter()
        e.open_file("f")
        e.write_entry("a", "1")
        e.open_section("S")
        assert e.entries_in_scope == 0
        e.write_entry("b", "2")
        assert e.entries_in_scope == 1

    def test_keys_and_values_escaped(self):
        e = JsonEmitter()
        e.open_file('a"b')
        e.write_entry("k\\", 'v"')
        e.close_file(is_last=True)
        assert e.result == '"a\\"b":{"k\\\\":"v\\""}'
