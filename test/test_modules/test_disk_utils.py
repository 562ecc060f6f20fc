import os
import tempfile

from modules.disk_utils import check_disk_full, existing_folder, file_size, remove_file


def test_disk_space():
    assert not check_disk_full(minimum=1), "Ups disk is full"
    assert check_disk_full(minimum="99TB"), "Ups disk is prety big"


def test_disk_space_of_not_yet_existing_file():
    with tempfile.TemporaryDirectory() as dir:
        assert not check_disk_full(f"{dir}/export.sqlite", minimum="1 KB")


def test_file_size_and_remove():
    with tempfile.TemporaryDirectory() as dir:
        file = f"{dir}/dump.sql"
        with open(file, 'wb') as f:
            f.write(b"x" * 2048)

        assert "KB" in file_size(file)
        assert remove_file(file)
        assert not os.path.exists(file)
        assert not remove_file(file)
        assert file_size(file) == "0 bytes"


def test_disk_space_of_file_in_missing_folders():
    with tempfile.TemporaryDirectory() as dir:
        assert existing_folder(f"{dir}/nodir/deeper/export.sqlite") == os.path.abspath(dir)
        assert not check_disk_full(f"{dir}/nodir/deeper/export.sqlite", minimum="1 KB")
