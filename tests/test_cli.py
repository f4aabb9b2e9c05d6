"""Tests for the command line interface."""

# pylint: disable=redefined-outer-name

import os
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from medtool.cli import USAGE_LIST, USAGE_PROCESS, USAGE_READ, run
from medtool.extractor import ExiftoolNotFoundError, MetadataContainer, MetadataReadError

TAKEN = datetime(2023, 5, 14, 13, 45, 30)


@pytest.fixture
def runner() -> Iterator[Mock]:
    with patch("medtool.cli.ExiftoolRunner") as runner_cls:
        instance = runner_cls.return_value
        instance.read_containers.return_value = [
            MetadataContainer("IFD0", {"Make": "Sony", "ModifyDate": "2023:06:01 00:00:00"}),
            MetadataContainer("ExifIFD", {"DateTimeOriginal": "2023:05:14 13:45:30"}),
        ]
        yield instance


class TestUsage:
    """Tests for usage errors."""

    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run([]) == 1
        out = capsys.readouterr().out
        assert USAGE_READ in out
        assert USAGE_LIST in out
        assert USAGE_PROCESS in out

    def test_unknown_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["frobnicate", "x"]) == 1
        out = capsys.readouterr().out
        assert USAGE_READ in out
        assert USAGE_PROCESS in out

    def test_read_without_file(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["read"]) == 1
        out = capsys.readouterr().out
        assert out.strip() == USAGE_READ

    def test_read_with_extra_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["read", "a.jpg", "b.jpg"]) == 1
        assert capsys.readouterr().out.strip() == USAGE_READ

    def test_list_missing_folder(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["list", str(tmp_path / "missing")]) == 1
        assert capsys.readouterr().out.strip() == USAGE_LIST

    def test_help_option_prints_combined_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["--help"]) == 1
        out = capsys.readouterr().out
        assert USAGE_READ in out
        assert USAGE_LIST in out
        assert USAGE_PROCESS in out

    def test_command_help_option_prints_command_usage(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(["read", "--help"]) == 1
        assert capsys.readouterr().out.strip() == USAGE_READ

    def test_process_too_many_arguments(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["process", str(tmp_path), "*", "true", "extra"]) == 1
        assert capsys.readouterr().out.strip() == USAGE_PROCESS

    def test_exiftool_missing(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("medtool.cli.ExiftoolRunner", side_effect=ExiftoolNotFoundError("no exiftool")):
            with pytest.raises(SystemExit) as exc_info:
                run(["list", str(tmp_path)])

        assert exc_info.value.code == 1
        assert "Error: no exiftool" in capsys.readouterr().err


class TestRead:
    """Tests for the read command."""

    def test_prints_groups_and_tags(self, runner: Mock, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["read", "photo.jpg"]) == 0

        out = capsys.readouterr().out
        assert out == (
            "🟢 IFD0:\n"
            "\tMake: Sony\n"
            "\tModifyDate: 2023:06:01 00:00:00\n"
            "🟢 ExifIFD:\n"
            "\tDateTimeOriginal: 2023:05:14 13:45:30\n"
        )
        runner.read_containers.assert_called_once_with(Path("photo.jpg"))

    def test_errors_propagate(self, runner: Mock) -> None:
        runner.read_containers.side_effect = MetadataReadError("Unknown file type")

        with pytest.raises(MetadataReadError):
            run(["read", "notes.txt"])


class TestList:
    """Tests for the list command."""

    def test_empty_folder(self, tmp_path: Path, runner: Mock, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["list", str(tmp_path)]) == 0
        assert capsys.readouterr().out == "Done!\n"

    def test_lists_without_changes(
        self, tmp_path: Path, runner: Mock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        photo = tmp_path / "IMG_0001.jpg"
        photo.write_bytes(b"x")
        mtime_before = photo.stat().st_mtime

        assert run(["list", str(tmp_path), "*.jpg"]) == 0

        out = capsys.readouterr().out
        assert f"[1] {photo} ✅ {TAKEN}" in out
        assert photo.exists()
        assert photo.stat().st_mtime == mtime_before

    def test_failures_reported_but_exit_zero(
        self, tmp_path: Path, runner: Mock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "notes.txt").write_text("x")
        runner.read_containers.side_effect = MetadataReadError("Unknown file type")

        assert run(["list", str(tmp_path)]) == 0

        out = capsys.readouterr().out
        assert "1 file(s) failed:" in out
        assert "notes.txt: Unknown file type" in out


class TestProcess:
    """Tests for the process command."""

    def test_without_renaming(self, tmp_path: Path, runner: Mock) -> None:
        photo = tmp_path / "IMG_0001.jpg"
        photo.write_bytes(b"x")
        other = tmp_path / "notes.txt"
        other.write_text("x")
        other_mtime = other.stat().st_mtime

        assert run(["process", str(tmp_path), "*.jpg", "FALSE"]) == 0

        assert photo.exists()
        assert os.stat(photo).st_mtime == pytest.approx(TAKEN.timestamp())
        assert other.stat().st_mtime == other_mtime

    def test_renames_by_default(self, tmp_path: Path, runner: Mock) -> None:
        nested = tmp_path / "trip"
        nested.mkdir()
        (nested / "IMG_0001.JPG").write_bytes(b"x")

        assert run(["process", str(tmp_path)]) == 0

        assert [p.name for p in nested.iterdir()] == ["2023-05-14 134530.jpg"]

    def test_renames_when_true(self, tmp_path: Path, runner: Mock) -> None:
        (tmp_path / "a.jpg").write_bytes(b"a")
        (tmp_path / "b.jpg").write_bytes(b"b")

        assert run(["process", str(tmp_path), "*.jpg", "True"]) == 0

        names = sorted(p.name for p in tmp_path.iterdir())
        assert names == ["2023-05-14 134530.jpg", "2023-05-14 134530[2].jpg"]

    @pytest.mark.parametrize("token", ["false", "maybe", "yes", "1"])
    def test_only_true_token_renames(self, tmp_path: Path, runner: Mock, token: str) -> None:
        photo = tmp_path / "IMG_0001.jpg"
        photo.write_bytes(b"x")

        assert run(["process", str(tmp_path), "*.jpg", token]) == 0

        assert [p.name for p in tmp_path.iterdir()] == ["IMG_0001.jpg"]
        assert os.stat(photo).st_mtime == pytest.approx(TAKEN.timestamp())
