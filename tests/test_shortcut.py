import pytest

from cybergod.maintainer import Journal
from cybergod.shortcut import ShortcutVirusRemover


@pytest.fixture
def infected(tmp_path):
    drive = tmp_path / "usb"
    (drive / "folder").mkdir(parents=True)
    (drive / "Photos.lnk").write_bytes(b"link")
    (drive / "folder" / "Docs.lnk").write_bytes(b"link")
    (drive / "payload.vbs").write_text("script")
    (drive / "folder" / "picture.png").write_bytes(b"png")
    return drive


def test_journal_records_start(tmp_path):
    journal = Journal(tmp_path / "journal.db")
    ShortcutVirusRemover(journal)
    rows = journal.rows("SHORTCUTVIRUSREMOVER")
    assert len(rows) == 1
    assert rows[0][0] == "Process started @"


def test_set_drive_letter_rejects_non_removable(tmp_path):
    remover = ShortcutVirusRemover()
    with pytest.raises(ValueError):
        remover.set_drive_letter(tmp_path)
    assert remover.can_start is False
    assert remover.drive is None


def test_scan_finds_shortcuts_and_suspects(infected):
    remover = ShortcutVirusRemover()
    found = remover.scan(infected)
    assert sorted(found) == sorted(
        [str(infected / "Photos.lnk"), str(infected / "folder" / "Docs.lnk")]
    )
    assert remover.suspected == [str(infected / "payload.vbs")]
    assert remover.infection_sign is True
    assert remover.is_scan_complete is True


def test_clean_drive_shows_no_infection(tmp_path):
    (tmp_path / "readme.txt").write_text("fine")
    remover = ShortcutVirusRemover()
    assert remover.scan(tmp_path) == []
    assert remover.infection_sign is False


def test_remove_before_scan_does_nothing(infected):
    remover = ShortcutVirusRemover()
    assert remover.remove_all_shortcuts() == []
    assert (infected / "Photos.lnk").exists()


def test_remove_all_shortcuts(infected):
    remover = ShortcutVirusRemover()
    remover.scan(infected)
    removed = remover.remove_all_shortcuts()
    assert sorted(removed) == sorted(remover.shortcuts)
    assert not (infected / "Photos.lnk").exists()
    assert not (infected / "folder" / "Docs.lnk").exists()
    assert (infected / "payload.vbs").exists()


def test_scan_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        ShortcutVirusRemover().scan(tmp_path / "absent")


def test_fix_infection_needs_drive():
    with pytest.raises(RuntimeError):
        ShortcutVirusRemover().fix_infection()