"""Tests for numbered log file rotation."""

from mcmfixtures.logfiles import rotate_log_file


def test_creates_new_file_when_missing(tmp_path):
    name = tmp_path / "mcm.log"

    with rotate_log_file(str(name)) as f:
        f.write("hello")

    assert name.read_text() == "hello"
    assert not (tmp_path / "mcm.log.1").exists()


def test_shifts_existing_backups(tmp_path):
    name = tmp_path / "mcm.log"
    name.write_text("current")
    (tmp_path / "mcm.log.1").write_text("one")
    (tmp_path / "mcm.log.2").write_text("two")

    with rotate_log_file(str(name)) as f:
        assert f.name == str(name)

    assert name.read_text() == ""
    assert (tmp_path / "mcm.log.1").read_text() == "current"
    assert (tmp_path / "mcm.log.2").read_text() == "one"
    assert (tmp_path / "mcm.log.3").read_text() == "two"
    assert not (tmp_path / "mcm.log.4").exists()


def test_ninth_backup_moves_to_tenth(tmp_path):
    name = tmp_path / "mcm.log"
    name.write_text("current")
    for i in range(1, 11):
        (tmp_path / f"mcm.log.{i}").write_text(str(i))

    rotate_log_file(str(name)).close()

    assert (tmp_path / "mcm.log.10").read_text() == "9"
    assert (tmp_path / "mcm.log.2").read_text() == "1"
    assert (tmp_path / "mcm.log.1").read_text() == "current"
    assert not (tmp_path / "mcm.log.11").exists()
