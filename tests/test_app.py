"""Tests for the cpuinfo reader and the command line."""

import json

import pytest

from pirev.__main__ import main
from pirev.core.cpuinfo import read_revision
from pirev.revision.errors import CpuinfoError


class TestCpuinfo:
    def test_reads_revision(self, cpuinfo_file):
        assert read_revision(cpuinfo_file("a02082")) == "a02082"

    def test_missing_revision_line(self, cpuinfo_file):
        with pytest.raises(CpuinfoError, match="No Revision line"):
            read_revision(cpuinfo_file())

    def test_missing_file(self, tmp_path):
        with pytest.raises(CpuinfoError, match="Could not open"):
            read_revision(tmp_path / "nope")

    def test_not_a_value_error(self, tmp_path):
        with pytest.raises(CpuinfoError) as exc:
            read_revision(tmp_path / "nope")
        assert not isinstance(exc.value, ValueError)
        assert isinstance(exc.value.__cause__, OSError)


class TestCli:
    def test_single_code(self, capsys):
        assert main(["a02082"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Revision code 0xA02082 interpreted:\n")
        assert "    Type/Model      : 3B\n" in out

    def test_json(self, capsys):
        assert main(["--json", "0x0002"]) == 0
        d = json.loads(capsys.readouterr().out)
        assert d["style"] == "old"
        assert d["manufacturer"] == "Egoman"

    def test_short_json_flag(self, capsys):
        assert main(["-j", "c03111"]) == 0
        assert json.loads(capsys.readouterr().out)["type"] == "4B"

    def test_codes_in_order(self, capsys):
        assert main(["0x2", "a02082"]) == 0
        out = capsys.readouterr().out
        assert out.index("0x2 interpreted") < out.index("0xA02082 interpreted")

    def test_unparsable_aborts(self, capsys):
        assert main(["zz", "a02082"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"zz"' in captured.err

    def test_first_error_stops_later_codes(self, capsys):
        assert main(["0x2", "0x0", "a02082"]) == 1
        captured = capsys.readouterr()
        assert "0x2 interpreted" in captured.out
        assert "0xA02082" not in captured.out
        assert "Invalid old style revision code 0x0" in captured.err

    def test_keep_going(self, capsys):
        assert main(["--keep-going", "0x0", "a02082"]) == 1
        captured = capsys.readouterr()
        assert "0xA02082 interpreted" in captured.out
        assert "[ERROR]" in captured.err

    def test_quiet_drops_prefix(self, capsys):
        assert main(["--quiet", "zz"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Could not parse")

    def test_reads_cpuinfo(self, capsys, cpuinfo_file):
        assert main(["--cpuinfo", str(cpuinfo_file("c03111"))]) == 0
        assert "Revision code 0xC03111 interpreted:" in capsys.readouterr().out

    def test_cpuinfo_without_revision(self, capsys, cpuinfo_file):
        assert main(["--cpuinfo", str(cpuinfo_file())]) == 1
        assert "No Revision line" in capsys.readouterr().err

    def test_cpuinfo_missing_file(self, capsys, tmp_path):
        assert main(["--cpuinfo", str(tmp_path / "nope")]) == 1
        assert "Could not open" in capsys.readouterr().err

    def test_list_legacy(self, capsys):
        assert main(["--list-legacy"]) == 0
        out = capsys.readouterr().out
        assert out.count("interpreted:") == 17
        assert "Revision code 0x15 interpreted:" in out


class TestLogging:
    def test_unknown_level(self):
        from pirev.utils.logger import setup_logging

        with pytest.raises(ValueError):
            setup_logging("LOUD")

    def test_debug_traces_fields(self, capsys):
        assert main(["--log-level", "DEBUG", "0x2"]) == 0
        err = capsys.readouterr().err
        assert "[DEBUG] pirev.revision.legacy: Legacy code 0x0002" in err
