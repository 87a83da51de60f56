import pytest

from fastaparser.cli import main
from fastaparser.converter import load_records
from fastaparser.models import Record

RECORDS = [Record("alpha", "ACGTTGCA"), Record("beta", "GGGGAAAA")]


@pytest.fixture
def fasta_path(tmp_path):
    path = tmp_path / "reads.fasta"
    path.write_text(">alpha\nACGT\nTGCA\n>beta\nGGGGAAAA\n", encoding="utf-8")
    return path


@pytest.mark.parametrize("ext", ["json", "csv", "tsv", "xml", "fa"])
def test_convert_to_file_round_trip(tmp_path, fasta_path, ext):
    target = tmp_path / f"out.{ext}"
    assert main([str(fasta_path), str(target)]) == 0
    assert load_records(target) == RECORDS


def test_convert_json_back_to_fasta(tmp_path, fasta_path):
    json_path = tmp_path / "mid.json"
    fasta_out = tmp_path / "final.fasta"
    assert main([str(fasta_path), str(json_path)]) == 0
    assert main([str(json_path), str(fasta_out)]) == 0
    assert load_records(fasta_out) == RECORDS


def test_default_output_is_csv_on_stdout(fasta_path, capsys):
    assert main([str(fasta_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "id,sequence"
    assert lines[1:] == ["alpha,ACGTTGCA", "beta,GGGGAAAA"]


def test_output_without_extension_is_csv(tmp_path, fasta_path):
    target = tmp_path / "plain"
    assert main([str(fasta_path), str(target)]) == 0
    assert target.read_text(encoding="utf-8").splitlines()[0] == "id,sequence"


def test_unsupported_input(tmp_path, capsys):
    source = tmp_path / "notes.txt"
    source.write_text("x", encoding="utf-8")
    assert main([str(source)]) == 1
    assert "Unsupported input format: txt" in capsys.readouterr().err


def test_unsupported_output(tmp_path, fasta_path, capsys):
    assert main([str(fasta_path), str(tmp_path / "out.doc")]) == 1
    assert "Unsupported output format: doc" in capsys.readouterr().err


def test_gc_flag(fasta_path, capsys):
    assert main([str(fasta_path), "--gc"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith(">alpha - GC Content:")
    assert lines[1].startswith(">beta - GC Content:")


def test_gc_flag_unsupported(tmp_path, capsys):
    assert main([str(tmp_path / "x.bin"), "--gc"]) == 1
    assert "Error: Unsupported format: bin" in capsys.readouterr().err


def test_stats_flag(tmp_path, fasta_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([str(fasta_path), "--stats"]) == 0
    assert capsys.readouterr().out.startswith("Sequences: 2\n")
    assert (tmp_path / "reads_length_hist.png").exists()
    assert (tmp_path / "reads_gc_hist.png").exists()


def test_missing_input_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.fasta")]) == 1
    assert capsys.readouterr().err.startswith("Error:")