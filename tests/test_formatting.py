"""Tests for rendering translation records."""

import pandas as pd

from codon_translator.core.translator import translate
from codon_translator.schemas.config import OutputSettings
from codon_translator.utils.formatting import (
    REPORT_COLUMNS,
    format_flat,
    format_report,
    records_to_dataframe,
    render,
    write_report_tsv,
)
from codon_translator.utils.translation import to_one_letter

RECORDS = translate("ATGTTTAAATAG")


def test_flat_space_separated():
    assert format_flat(RECORDS) == "Met Phe Lys STOP"


def test_flat_hyphen_separated():
    assert format_flat(RECORDS, separator="-") == "Met-Phe-Lys-STOP"


def test_flat_one_letter():
    assert format_flat(RECORDS, symbols="one") == "MFK*"
    assert format_flat(RECORDS, separator="-", symbols="one") == "M-F-K-*"
    assert format_flat(RECORDS, separator=" ", symbols="one") == "M F K *"
    assert format_flat(RECORDS, separator="", symbols="three") == "MetPheLysSTOP"


def test_report_lines():
    assert format_report(RECORDS).splitlines() == [
        "ATG -> Met",
        "TTT -> Phe",
        "AAA -> Lys",
        "TAG -> STOP",
    ]


def test_empty_records_render_empty():
    assert format_flat(()) == ""
    assert format_report(()) == ""


def test_render_follows_settings():
    assert render(RECORDS, OutputSettings(mode="report")).startswith("ATG -> Met")
    assert render(RECORDS, OutputSettings(separator="-")) == "Met-Phe-Lys-STOP"


def test_to_one_letter():
    assert to_one_letter("Trp") == "W"
    assert to_one_letter("STOP") == "*"
    assert to_one_letter("UNKNOWN") == "X"


def test_dataframe_columns_and_positions():
    df = records_to_dataframe(RECORDS)
    assert list(df.columns) == REPORT_COLUMNS
    assert df["position"].tolist() == [0, 3, 6, 9]
    assert df["one_letter"].tolist() == ["M", "F", "K", "*"]


def test_write_report_tsv(tmp_path):
    out_path = write_report_tsv(RECORDS, tmp_path / "out" / "report.tsv")
    df = pd.read_csv(out_path, sep="\t")
    assert len(df) == 4
    assert df.iloc[-1]["amino_acid"] == "STOP"
