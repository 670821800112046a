import pytest

from mzqc.core.exceptions import DocumentIOError
from mzqc.core.term_cache import TermCache
from mzqc.shared.obo_parser import OboParser

OBO_TEXT = """format-version: 1.2
ontology: qc

! a comment line
[Term]
id: QC:4000053
name: Quameter metric: RT-Duration
def: "The retention time duration of the MS run in seconds." [PSI:QC]
is_a: QC:4000003 ! single value
relationship: has_units UO:0000010 ! second
relationship: has_value_type xsd:float

[Term]
id: QC:4000059
name: Number of MS1 spectra
is_a: QC:4000003
is_a: QC:4000001

[Typedef]
id: has_units
name: has_units
"""


def test_terms_are_parsed():
    cache = TermCache()
    assert cache.load(OBO_TEXT) == 2

    term = cache.get("QC:4000053")
    assert term.name == "Quameter metric: RT-Duration"
    assert term.definition == '"The retention time duration of the MS run in seconds." [PSI:QC]'
    assert term.parent_terms == ["QC:4000003 ! single value"]
    assert term.unit == "UO:0000010 ! second"
    assert term.value_type == "xsd:float"
    assert len(term.relationships) == 2

    assert cache["QC:4000059"].parent_terms == ["QC:4000003", "QC:4000001"]
    assert cache["QC:4000059"].value_type is None


def test_typedef_stanza_is_ignored():
    cache = TermCache()
    cache.load(OBO_TEXT)
    assert "has_units" not in cache
    assert cache["QC:4000059"].name == "Number of MS1 spectra"


def test_cardinality_counts_terms_with_ids():
    text = "\n".join(f"[Term]\nid: QC:{i:07d}\nname: term {i}\n" for i in range(5))
    assert TermCache().load(text) == 5


def test_term_without_id_is_not_counted():
    text = "[Term]\n\n\n[Term]\nid: QC:1\n[Term]\nname: no id\n"
    cache = TermCache()
    assert cache.load(text) == 1
    assert list(cache) == ["QC:1"]


def test_duplicate_accession_last_wins():
    text = "[Term]\nid: QC:1\nname: first\n[Term]\nid: QC:1\nname: second\n"
    cache = TermCache()
    assert cache.load(text) == 1
    assert cache["QC:1"].name == "second"


def test_lines_outside_terms_and_unknown_keys_are_ignored():
    text = "id: QC:9\n[Term]\nid: QC:1\nsynonym: \"x\" EXACT []\nxref: foo\n"
    cache = TermCache()
    assert cache.load(text) == 1
    assert "QC:9" not in cache


def test_reload_replaces_content():
    cache = TermCache()
    cache.load(OBO_TEXT)
    assert cache.load("[Term]\nid: QC:1\n") == 1
    assert "QC:4000053" not in cache
    assert len(cache) == 1


def test_load_from_file(tmp_path):
    obo_file = tmp_path / "qc.obo"
    obo_file.write_text(OBO_TEXT.replace("\n", "\r\n"))
    cache = TermCache()
    assert cache.load_from_obo_file(str(obo_file)) == 2
    assert cache.source_file == str(obo_file)
    assert cache["QC:4000059"].name == "Number of MS1 spectra"


def test_load_missing_file(tmp_path):
    with pytest.raises(DocumentIOError):
        TermCache().load_from_obo_file(str(tmp_path / "missing.obo"))


def test_builders_use_cached_terms():
    cache = TermCache(parser=OboParser())
    cache.load(OBO_TEXT)

    param = cache.cv_parameter("QC:4000059", value="12", cv_ref="QC")
    assert param.to_dict() == {"accession": "QC:4000059", "name": "Number of MS1 spectra",
                               "value": "12", "cvRef": "QC"}

    metric = cache.quality_metric("QC:4000053", value=3600.0)
    assert metric.name == "Quameter metric: RT-Duration"
    assert metric.unit == "UO:0000010 ! second"
    assert cache.quality_metric("QC:4000053", unit="s").unit == "s"

    with pytest.raises(KeyError):
        cache.cv_parameter("QC:missing")
