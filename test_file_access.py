from file_access import read_lines, remove_file, write_line, write_lines


def test_write_then_read_lines(tmp_path):
    path = str(tmp_path / "out.txt")
    write_lines(path, ["0:10", "1:12"])
    assert read_lines(path) == ["0:10", "1:12"]


def test_write_line_replaces_file_with_one_line(tmp_path):
    path = str(tmp_path / "out.txt")
    write_lines(path, ["0:10", "1:12"])

    write_line(path, "3:20")

    assert read_lines(path) == ["3:20"]


def test_remove_file_reports_missing(tmp_path):
    path = tmp_path / "gone.txt"
    path.write_text("x")
    assert remove_file(str(path)) is True
    assert remove_file(str(path)) is False
