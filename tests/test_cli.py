"""
CLI tests: search output and Excel export.
"""
import pytest

from fincheck.cli import build_parser, main


class TestSearchCommand:

    def test_found(self, data_file, capsys):
        main(["search", "kredit", "--data", str(data_file)])
        out = capsys.readouterr().out
        assert "Found 1 result(s) of 4 records." in out
        assert "PT Kredit Pintar Indonesia" in out

    def test_not_found(self, data_file, capsys):
        main(["search", "pinjol ilegal", "--data", str(data_file)])
        out = capsys.readouterr().out
        assert "ILEGAL" in out
        assert "Tips:" in out

    def test_summary_without_criteria(self, data_file, capsys):
        main(["search", "--data", str(data_file)])
        out = capsys.readouterr().out
        assert "Total registered fintech companies: 4" in out
        assert "2021-01-05 to 2021-12-23" in out

    def test_date_and_field_filters(self, data_file, capsys):
        main(["search", "--business-type", "pinjaman", "--from", "2021-06-01", "--data", str(data_file)])
        out = capsys.readouterr().out
        assert "Found 1 result(s)" in out

    def test_limit(self, data_file, capsys):
        main(["search", "pt", "--limit", "2", "--data", str(data_file)])
        out = capsys.readouterr().out
        assert "2 more" in out

    def test_invalid_date(self, data_file):
        with pytest.raises(SystemExit):
            main(["search", "--from", "2021/01/01", "--data", str(data_file)])


class TestExportCommand:

    def test_writes_workbook(self, data_file, tmp_path, capsys):
        out_path = tmp_path / "hasil.xlsx"
        main(["export", "kredit", "--data", str(data_file), "--output", str(out_path)])
        assert out_path.exists()
        assert "1 of 4 records" in capsys.readouterr().out


def test_filter_args_parsed():
    args = build_parser().parse_args(["search", "q", "--company", "pt", "--to", "2021-01-31"])
    assert args.query == "q"
    assert args.company == "pt"
    assert args.date_to.isoformat() == "2021-01-31"
    assert args.date_from is None


def test_no_command_prints_help(capsys):
    main([])
    assert "usage" in capsys.readouterr().out.lower()
