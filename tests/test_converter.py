import json

import pytest

from fastaparser.converter import (
    UnsupportedFormatError,
    from_csv,
    from_json,
    from_tsv,
    from_xml,
    load_records,
)
from fastaparser.models import Record


def test_from_json_reads_array(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(json.dumps([{"id": "a", "seq": "AC"}, {"id": "b", "seq": "GT"}]))
    assert from_json(path) == [Record("a", "AC"), Record("b", "GT")]


def test_from_json_rejects_object(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(json.dumps({"id": "a", "seq": "AC"}))
    with pytest.raises(ValueError):
        from_json(path)


def test_from_json_rejects_missing_field(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(json.dumps([{"id": "a"}]))
    with pytest.raises(ValueError, match="seq"):
        from_json(path)


def test_from_csv_skips_header_and_blank_lines(tmp_path):
    path = tmp_path / "records.csv"
    path.write_text('id,sequence\na,ACGT\n\n"b,c",GG\n')
    assert from_csv(path) == [Record("a", "ACGT"), Record("b,c", "GG")]


def test_from_csv_single_column_defaults_sequence(tmp_path):
    path = tmp_path / "records.csv"
    path.write_text("id\nonly\n")
    assert from_csv(path) == [Record("only", "")]


def test_from_csv_uneven_row_raises(tmp_path):
    path = tmp_path / "records.csv"
    path.write_text("id,sequence\na,AC,extra\n")
    with pytest.raises(ValueError):
        from_csv(path)


def test_from_csv_empty_file(tmp_path):
    path = tmp_path / "records.csv"
    path.write_text("")
    assert from_csv(path) == []


def test_from_tsv_reads_tabs(tmp_path):
    path = tmp_path / "records.tsv"
    path.write_text("id\tsequence\nx y\tAAAA\n")
    assert from_tsv(path) == [Record("x y", "AAAA")]


def test_from_xml_reads_records_and_skips_incomplete(tmp_path):
    path = tmp_path / "records.xml"
    path.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n<records>\n'
        "  <record>\n    <id> r1 </id>\n    <sequence>ACGT</sequence>\n  </record>\n"
        "  <record>\n    <id></id>\n    <sequence>GG</sequence>\n  </record>\n"
        "  <record>\n    <id>r3</id>\n  </record>\n"
        "</records>\n"
    )
    assert from_xml(path) == [Record("r1", "ACGT")]


def test_load_records_dispatches_on_upper_case_extension(tmp_path):
    path = tmp_path / "reads.FASTA"
    path.write_text(">s\nAC\n")
    assert load_records(path) == [Record("s", "AC")]


def test_load_records_csv(tmp_path):
    path = tmp_path / "reads.csv"
    path.write_text("id,sequence\ns,AC\n")
    assert load_records(path) == [Record("s", "AC")]


def test_load_records_unsupported_extension(tmp_path):
    path = tmp_path / "reads.txt"
    path.write_text("")
    with pytest.raises(UnsupportedFormatError, match="Unsupported format: txt") as info:
        load_records(path)
    assert info.value.extension == "txt"


def test_unsupported_format_is_value_error(tmp_path):
    with pytest.raises(ValueError):
        load_records(tmp_path / "noextension")