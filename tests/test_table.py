import pytest

import svparse.table
from svparse.errors import (
    AmbiguityError,
    DuplicateHeaderError,
    FieldIndexError,
    HeadersNotConfiguredError,
    UnknownHeaderError,
)
from svparse.table import RecordTable, SvRecord


@pytest.fixture
def table():
    return RecordTable.build(["a,b,c", "1,2,3", "4,5,6"], has_headers=True)


def test_build_with_headers(table):
    assert table.separator == ","
    assert table.headers == ("a", "b", "c")
    assert len(table) == 2
    assert table.field(0, "b") == "2"
    assert table.field(1, 2) == "6"
    assert table[1]["a"] == "4"


def test_build_without_headers():
    table = RecordTable.build(["a,b,c", "1,2,3"], has_headers=False)
    assert table.headers is None
    assert [list(r) for r in table] == [["a", "b", "c"], ["1", "2", "3"]]

    with pytest.raises(HeadersNotConfiguredError):
        table.field(0, "a")
    with pytest.raises(HeadersNotConfiguredError):
        table.as_dicts()


def test_empty_fields_are_preserved():
    table = RecordTable.build(["a,b,c", "1,,3"])
    assert table[0].fields == ("1", "", "3")


def test_multi_character_separator_is_split_literally():
    table = RecordTable.build(["a.*b", "1.*2"])
    assert table.separator == ".*"
    assert table[0].fields == ("1", "2")


def test_out_of_range_access(table):
    with pytest.raises(FieldIndexError):
        table.field(2, 0)
    with pytest.raises(FieldIndexError):
        table.field(0, 3)
    with pytest.raises(IndexError):
        table[-1]


def test_unknown_header(table):
    with pytest.raises(UnknownHeaderError):
        table.field(0, "z")
    with pytest.raises(KeyError):
        table[0]["z"]
    assert table[0].get("z") is None
    assert table[0].get("c") == "3"


def test_access_errors_leave_table_usable(table):
    with pytest.raises(FieldIndexError):
        table.field(5, 0)
    assert table.field(0, 0) == "1"


def test_iteration_is_restartable(table):
    first = [list(r) for r in table]
    second = [list(r) for r in table]
    assert first == second == [["1", "2", "3"], ["4", "5", "6"]]


def test_inference_errors_propagate():
    with pytest.raises(AmbiguityError):
        RecordTable.build(["a,b|c", "1,2|3"])


def test_duplicate_headers_are_rejected(monkeypatch):
    monkeypatch.setattr(svparse.table, "infer_separator", lambda *args: ",")
    with pytest.raises(DuplicateHeaderError) as excinfo:
        RecordTable.build(["a,a", "1,2"], has_headers=True)
    assert excinfo.value.duplicates == ["a"]


def test_as_dicts(table):
    assert table.as_dicts() == [{"a": "1", "b": "2", "c": "3"}, {"a": "4", "b": "5", "c": "6"}]


def test_record_str_is_tab_terminated(table):
    assert str(table[0]) == "1\t2\t3\t"


def test_render(table):
    expected = (
        "****************\n"
        "* a  * b  * c  *\n"
        "****************\n"
        "* 1  * 2  * 3  *\n"
        "* 4  * 5  * 6  *\n"
        "****************\n"
    )
    assert table.render() == expected
    assert str(table) == expected


def test_render_contains_every_field():
    table = RecordTable.build(["name;city", "Ann;Oslo", "Bartholomew;Rio"])
    text = table.render()
    for value in table.headers:
        assert value in text
    for record in table:
        for value in record:
            assert value in text
    assert len({len(line) for line in text.splitlines()}) == 1


def test_render_without_records():
    assert RecordTable.build(["a,b"]).render() == ""


def test_render_ragged_rows():
    table = RecordTable([SvRecord(["1", "2"]), SvRecord(["333"])], separator=",")
    assert table.render() == (
        "*************\n"
        "* 1    * 2  *\n"
        "* 333  *    *\n"
        "*************\n"
    )
