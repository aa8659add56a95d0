import pytest

from cybergod.duplicates import DuplicateFinder, is_extension_suited
from cybergod.maintainer import Journal


@pytest.mark.parametrize(
    ("extension", "expected"),
    [(".png", True), (".mp3", True), (".docx", True), (".exe", False), ("", False)],
)
def test_is_extension_suited(extension, expected):
    assert is_extension_suited(extension) is expected


def test_file_size_checker():
    finder = DuplicateFinder()
    assert finder.file_size_checker(123, "C:\\") is False
    assert finder.file_size_checker(123, "C:\\") is True
    assert finder.file_size_checker(123, "D:\\") is True
    assert finder.file_size_checker(122, "D:\\") is False
    assert finder.same_size == {"C:\\", "D:\\"}


def test_check_hash_signatures():
    finder = DuplicateFinder()
    assert finder.check_hash_signatures("aaa", "aa") is False
    assert finder.check_hash_signatures("aaa", "a") is True
    assert finder.check_hash_signatures("aa", "aa") is False
    assert finder.check_hash_signatures("aa", "a") is True
    assert finder.check_hash_signatures("jjhjfjhjdff", "aa") is False
    assert finder.check_hash_signatures("jhghkkddkjs", "a") is False
    assert finder.duplicates == {"a", "aa"}


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "files"
    (root / "sub").mkdir(parents=True)
    (root / "one.txt").write_bytes(b"same content")
    (root / "sub" / "two.txt").write_bytes(b"same content")
    (root / "other.txt").write_bytes(b"diff content")
    (root / "prog.exe").write_bytes(b"same content")
    return root


def test_scan_and_find(tree):
    finder = DuplicateFinder()
    assert finder.scan(tree) == 4
    found = finder.find_the_duplicates()
    assert found == {str(tree / "one.txt"), str(tree / "sub" / "two.txt")}
    assert finder.duplicate_count == 2
    assert str(tree / "other.txt") in finder.same_size
    assert str(tree / "prog.exe") not in finder.same_size


def test_scan_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        DuplicateFinder().scan(tmp_path / "absent")


def test_report_and_journal(tree, tmp_path):
    journal = Journal(tmp_path / "journal.db")
    finder = DuplicateFinder(journal)
    finder.scan(tree)
    finder.find_the_duplicates()
    report = finder.write_report(tmp_path / "duplicates.html")
    text = report.read_text(encoding="utf-8")
    assert text.count("IDENTIFIED AS A DUPLICATE") == 2
    assert str(tree / "one.txt") in text
    assert text.endswith("</html>")
    rows = journal.rows("DUPEREMOVER")
    assert rows[0][0] == "Process Started"
    assert rows[1][0] == "Process Ended"
    assert (rows[2][0], rows[2][2]) == ("Files scanned: ", "4")
    assert (rows[3][0], rows[3][2]) == ("Duplicates Found: ", "2")