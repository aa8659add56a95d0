import sqlite3
from contextlib import closing

import pytest

from cybergod.hashing import md5_bytes
from cybergod.verifier import Verifier, boot_loader

ADDER = b"print('adder')\n"


def _make_db(path, rows):
    with closing(sqlite3.connect(path)) as connection, connection:
        connection.execute("CREATE TABLE hashes (ID INTEGER, Hash TEXT, Size INTEGER)")
        connection.executemany("INSERT INTO hashes VALUES (?, ?, ?)", rows)


def _row(path, file_id):
    with closing(sqlite3.connect(path)) as connection:
        return connection.execute(
            "SELECT Hash, Size FROM hashes WHERE ID = ?", (file_id,)
        ).fetchone()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "Adder.py").write_bytes(ADDER)
    return tmp_path


def test_unchanged_file_passes_without_asking(workdir):
    db = workdir / "v.db"
    _make_db(db, [(0, md5_bytes(ADDER), len(ADDER))])
    asked = []
    verifier = Verifier(0, db)
    assert verifier.hash_of_file == md5_bytes(ADDER)
    assert verifier.can_process_further(lambda name: asked.append(name) or True) is True
    assert asked == []


def test_modified_file_accepted_updates_record(workdir):
    db = workdir / "v.db"
    _make_db(db, [(0, "0" * 32, 1)])
    asked = []
    result = Verifier(0, db).can_process_further(lambda name: asked.append(name) or True)
    assert result is True
    assert asked == ["Adder.py"]
    assert _row(db, 0) == (md5_bytes(ADDER), len(ADDER))


def test_modified_file_rejected_keeps_record(workdir):
    db = workdir / "v.db"
    _make_db(db, [(0, "0" * 32, 1)])
    assert Verifier(0, db).can_process_further(lambda name: False) is False
    assert _row(db, 0) == ("0" * 32, 1)


def test_unknown_id_is_invalid(workdir):
    db = workdir / "v.db"
    _make_db(db, [(5, "0" * 32, 1)])
    asked = []
    assert Verifier(5, db).can_process_further(lambda name: asked.append(name)) is False
    assert asked == []


def test_short_hash_is_invalid(workdir):
    db = workdir / "v.db"
    _make_db(db, [(0, "abc", 1)])
    assert Verifier(0, db).can_process_further(lambda name: True) is False


def test_missing_database_is_invalid_and_not_created(workdir):
    db = workdir / "none.db"
    verifier = Verifier(0, db)
    assert verifier.hash_of_file is None
    assert verifier.can_process_further(lambda name: True) is False
    assert not db.exists()


def test_update_hashes_and_size_round_trip(workdir):
    db = workdir / "v.db"
    _make_db(db, [(1, "0" * 32, 1)])
    verifier = Verifier(1, db)
    assert verifier.update_hashes_and_size("f" * 32, 42) is True
    assert _row(db, 1) == ("f" * 32, 42)
    assert Verifier(1, db).size_of_file == 42


def test_boot_loader_reports_each_id(workdir):
    db = workdir / "v.db"
    _make_db(db, [(0, md5_bytes(ADDER), len(ADDER))])
    assert boot_loader(db, lambda name: False) == {0: True, 1: False, 2: False}