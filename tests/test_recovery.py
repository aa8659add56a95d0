import pytest

from cybergod.maintainer import Journal
from cybergod.recovery import RECOVERY_FOLDER, Recovery, is_safe_recoverable_format


@pytest.mark.parametrize(
    ("extension", "expected"),
    [(".jpg", True), (".pdf", True), (".mp3", False), (".exe", False)],
)
def test_is_safe_recoverable_format(extension, expected):
    assert is_safe_recoverable_format(extension) is expected


@pytest.fixture
def drive(tmp_path):
    root = tmp_path / "drive"
    bin_dir = root / "$RECYCLE.BIN" / "S-1"
    bin_dir.mkdir(parents=True)
    (bin_dir / "photo.jpg").write_bytes(b"jpeg data")
    (bin_dir / "tool.exe").write_bytes(b"binary")
    (root / "$Ideleted.txt").write_text("lost", encoding="utf-8")
    (root / "normal.txt").write_text("kept", encoding="utf-8")
    return root


def test_run_recovers_files(drive, tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    recovery = Recovery(drive, out)
    recovered = recovery.run()
    folder = out / RECOVERY_FOLDER
    assert sorted(p.name for p in folder.iterdir()) == ["$Ideleted.txt", "photo.jpg"]
    assert sorted(recovered) == sorted(str(p) for p in folder.iterdir())
    assert (folder / "photo.jpg").read_bytes() == b"jpeg data"


def test_existing_copy_is_not_overwritten(drive, tmp_path):
    out = tmp_path / "out"
    folder = out / RECOVERY_FOLDER
    folder.mkdir(parents=True)
    (folder / "photo.jpg").write_bytes(b"older")
    recovered = Recovery(drive, out).run()
    assert (folder / "photo.jpg").read_bytes() == b"older"
    assert [p for p in recovered if p.endswith("photo.jpg")] == []


def test_run_without_recycle_bin(tmp_path):
    root = tmp_path / "empty"
    root.mkdir()
    out = tmp_path / "out"
    assert Recovery(root, out).run() == []
    assert (out / RECOVERY_FOLDER).is_dir()


def test_scan_missing_directory(tmp_path):
    recovery = Recovery(tmp_path, tmp_path)
    with pytest.raises(FileNotFoundError):
        recovery.scan(tmp_path / "absent")
    with pytest.raises(FileNotFoundError):
        recovery.non_user_file_scan(tmp_path / "absent")


def test_journal_records_start_and_end(drive, tmp_path):
    journal = Journal(tmp_path / "journal.db")
    recovery = Recovery(drive, tmp_path / "out", journal)
    recovery.run()
    recovery.end()
    assert [row[0] for row in journal.rows("RECOVERY")] == [
        "Recovery process has been started",
        "Recovery process has been completed",
    ]