import pytest

from algonotes.csv_reader import Column, CsvError, CsvReader


@pytest.fixture
def people(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text("name,age,city\nann,31,oslo\nbob,45,rome\ncid,27,lima\n")
    return path


def test_reads_all_columns(people):
    with CsvReader(people) as reader:
        assert reader.read_line()
        assert reader.row() == {"age": "31", "city": "oslo", "name": "ann"}
        assert reader.read_line()
        assert reader.row()["name"] == "bob"


def test_end_of_file(people):
    with CsvReader(people) as reader:
        results = [reader.read_line() for _ in range(4)]
    assert results == [True, True, True, False]


def test_selected_columns_only(people):
    with CsvReader(people, [Column("city"), "name"]) as reader:
        reader.read_line()
        assert reader.row() == {"city": "oslo", "name": "ann"}


def test_optional_missing_column_is_not_tracked(people):
    with CsvReader(people, [Column("name"), Column("zip")]) as reader:
        reader.read_line()
        assert reader.row() == {"name": "ann"}


def test_required_column_missing(people):
    with pytest.raises(CsvError, match="Column zip not found"):
        CsvReader(people, [Column("name", True), Column("zip", True)])


def test_missing_file(tmp_path):
    with pytest.raises(CsvError, match="Failed to open file"):
        CsvReader(tmp_path / "absent.csv")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    with pytest.raises(CsvError, match="File is empty"):
        CsvReader(path)


def test_bad_max_size(people):
    with pytest.raises(CsvError, match="Maximum line size"):
        CsvReader(people, max_size=0)


def test_empty_and_trailing_fields(tmp_path):
    path = tmp_path / "gaps.csv"
    path.write_text("a,b,c\n,x,\n")
    with CsvReader(path) as reader:
        reader.read_line()
        assert reader.row() == {"a": "", "b": "x", "c": ""}


def test_several_delimiter_characters(tmp_path):
    path = tmp_path / "mixed.txt"
    path.write_text("a;b|c\n1|2;3\n")
    with CsvReader(path, delimiter=";|") as reader:
        reader.read_line()
        assert reader.row() == {"a": "1", "b": "2", "c": "3"}


def test_short_line_leaves_columns_unset(tmp_path):
    path = tmp_path / "short.csv"
    path.write_text("a,b,c\n1\n")
    with CsvReader(path) as reader:
        reader.read_line()
        assert reader.row() == {"a": "1", "b": None, "c": None}


def test_duplicate_header_uses_first(tmp_path):
    path = tmp_path / "dup.csv"
    path.write_text("k,k\nfirst,second\n")
    with CsvReader(path) as reader:
        reader.read_line()
        assert reader.row() == {"k": "first"}


def test_long_lines_are_read_in_pieces(tmp_path):
    path = tmp_path / "long.csv"
    path.write_text("v\nabcdefgh\n")
    with CsvReader(path, max_size=5) as reader:
        reader.read_line()
        assert reader.row() == {"v": "abcd"}
        reader.read_line()
        assert reader.row() == {"v": "efgh"}


def test_process_offset_and_length(people):
    seen = []
    with CsvReader(people) as reader:
        reader.process(lambda row, n: seen.append((n, row["name"])) or True, 1, 1)
    assert seen == [(1, "bob")]


def test_process_all_lines(people):
    seen = []
    with CsvReader(people) as reader:
        reader.process(lambda row, n: seen.append(row["city"]) or True)
    assert seen == ["oslo", "rome", "lima"]


def test_process_stops_when_callback_says_so(people):
    seen = []
    with CsvReader(people) as reader:
        reader.process(lambda row, n: seen.append(n))
    assert seen == [0]


def test_close_and_context_manager(people):
    with CsvReader(people) as reader:
        assert reader.is_open()
    assert not reader.is_open()
    assert reader.read_line() is False


def test_column_equality_ignores_required():
    assert Column("x", True) == Column("x", False)
    assert len({Column("x", True), Column("x")}) == 1
    assert Column("x") != Column("y")