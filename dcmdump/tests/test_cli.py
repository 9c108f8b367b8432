# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Tests for command-line interface"""

from argparse import ArgumentTypeError

import pytest

from dcmdump.cli.main import filespec_parser, folder_parser, main
from dcmdump.tests._encoding import EXPLICIT_DATASET, IMPLICIT_DATASET


class TestFileSpec:
    def test_filename(self, explicit_name):
        assert explicit_name == filespec_parser(explicit_name)

    def test_file_not_found(self, tmp_path):
        missing = str(tmp_path / "missing.dcm")
        with pytest.raises(ArgumentTypeError, match="not found"):
            filespec_parser(missing)

    def test_not_a_file(self, tmp_path):
        with pytest.raises(ArgumentTypeError, match="is not a file"):
            filespec_parser(str(tmp_path))

    def test_folder(self, tmp_path, explicit_name):
        assert str(tmp_path) == folder_parser(str(tmp_path))
        with pytest.raises(ArgumentTypeError, match="Folder .* not found"):
            folder_parser(explicit_name)


class TestCLIcall:
    """Test calls to `dcmdump` command-line interface"""

    def test_bare_command(self, capsys):
        """Test dcmdump with no arguments prints the main help"""
        main([])
        out, _ = capsys.readouterr()
        assert out.startswith("usage: dcmdump [-h] {help,")

    def test_help(self, capsys):
        """Test dcmdump help lists the subcommands"""
        main("help".split())
        out, _ = capsys.readouterr()
        assert "Use dcmdump help [subcommand]" in out
        assert "Available subcommands:" in out
        for subcommand in ("show", "lookup", "scan"):
            assert subcommand in out

    def test_help_subcommand(self, capsys):
        """Test dcmdump help with a subcommand shows its help"""
        main("help show".split())
        out, _ = capsys.readouterr()
        assert out.startswith("usage: dcmdump show")

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["show", str(tmp_path / "missing.dcm")])

        assert 2 == exc.value.code
        _, err = capsys.readouterr()
        assert "not found" in err


class TestShow:
    def test_show(self, explicit_name, capsys):
        """Every element is shown on its own line"""
        main(["show", explicit_name])
        out, err = capsys.readouterr()
        lines = out.splitlines()
        assert 5 == len(lines)
        assert (
            "0132 (00020000) UL 4 4 File Meta Information Group Length 28"
            == lines[0]
        )
        assert "0172 (00080018) UI 0 8 SOP Instance UID 1.2.3.4" == lines[2]
        assert "0188 (00100010) PN 0 8 Patient's Name Doe^John" == lines[3]
        assert "" == err

    def test_truncated(self, truncated_name, capsys):
        """Elements before the problem are shown with a warning"""
        main(["show", truncated_name])
        out, err = capsys.readouterr()
        assert 4 == len(out.splitlines())
        assert "stopped at offset 204 of 209" in err

    def test_not_dicom(self, tmp_path, capsys):
        path = tmp_path / "notes.txt"
        path.write_text("x" * 200)
        with pytest.raises(SystemExit) as exc:
            main(["show", str(path)])

        assert 1 == exc.value.code
        _, err = capsys.readouterr()
        assert "Error reading" in err
        assert "force=True" in err

    def test_force(self, tmp_path, capsys):
        """A data set with no preamble can be forced"""
        path = tmp_path / "raw.dcm"
        path.write_bytes(EXPLICIT_DATASET)
        main(["show", "-f", str(path)])
        out, _ = capsys.readouterr()
        lines = out.splitlines()
        assert 3 == len(lines)
        assert "0000 (00080018) UI 0 8 SOP Instance UID 1.2.3.4" == lines[0]
        assert "0016 (00100010) PN 0 8 Patient's Name Doe^John" == lines[1]

    def test_force_implicit(self, tmp_path, capsys):
        path = tmp_path / "raw.dcm"
        path.write_bytes(IMPLICIT_DATASET)
        main(["show", "-f", "--implicit", str(path)])
        out, err = capsys.readouterr()
        lines = out.splitlines()
        assert 3 == len(lines)
        assert lines[0].startswith("0000 (00080018)  0 8 SOP Instance UID")
        assert lines[1].startswith("0016 (00100010)  0 8 Patient's Name")
        assert "" == err

    def test_implicit_and_explicit(self, explicit_name, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["show", "--implicit", "--explicit", explicit_name])

        assert 2 == exc.value.code

    def test_debug(self, explicit_name, capsys, restore_debugging):
        main(["show", "--debug", explicit_name])
        out, err = capsys.readouterr()
        assert 5 == len(out.splitlines())
        assert "Decoding explicit VR elements" in err
        assert "(0010, 0010) PN Length: 8" in err


class TestLookup:
    @pytest.mark.parametrize(
        "name", ["PatientName", "Patient's Name", "00100010"]
    )
    def test_found(self, explicit_name, capsys, name):
        main(["lookup", explicit_name, name])
        out, _ = capsys.readouterr()
        assert "0188 (00100010) PN 0 8 Patient's Name Doe^John\n" == out

    def test_missing(self, explicit_name, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["lookup", explicit_name, "PatientID"])

        assert 1 == exc.value.code
        _, err = capsys.readouterr()
        assert f"No element 'PatientID' found in '{explicit_name}'" in err


class TestScan:
    def test_scan(self, tmp_path, explicit_name, implicit_name, capsys):
        """Each DICOM file gets a summary line, other files are skipped"""
        (tmp_path / "notes.txt").write_text("x" * 200)
        sub = tmp_path / "sub"
        sub.mkdir()
        (sub / "truncated.dcm").write_bytes(
            open(explicit_name, "rb").read()[:-5]
        )

        main(["scan", str(tmp_path)])
        out, err = capsys.readouterr()
        assert [
            f"{explicit_name}: 5 elements, Explicit VR Little Endian",
            f"{implicit_name}: 5 elements, Implicit VR Little Endian",
            f"{sub / 'truncated.dcm'}: 4 elements, Explicit VR Little Endian",
        ] == out.splitlines()
        assert "stopped at offset 204 of 209" in err

    def test_unreadable_file(self, tmp_path, explicit_name, implicit_name,
                             monkeypatch, capsys):
        """A file that can't be read is reported and the scan continues"""
        import dcmdump.cli.scan

        dcmread = dcmdump.cli.scan.dcmread

        def read(path):
            if path == explicit_name:
                raise PermissionError(13, "Permission denied")
            return dcmread(path)

        monkeypatch.setattr(dcmdump.cli.scan, "dcmread", read)
        main(["scan", str(tmp_path)])
        out, err = capsys.readouterr()
        assert [
            f"{explicit_name}: [Errno 13] Permission denied",
            f"{implicit_name}: 5 elements, Implicit VR Little Endian",
        ] == out.splitlines()

    def test_not_a_folder(self, explicit_name):
        with pytest.raises(SystemExit) as exc:
            main(["scan", explicit_name])

        assert 2 == exc.value.code
