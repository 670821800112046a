import re

from mzqc.constants import DEFAULT_VERSION
from mzqc.models.input_file import InputFileDescriptor
from mzqc.models.metric_value import MetricValue
from mzqc.models.mzqc_document import MzQCDocument
from mzqc.models.quality_group import RunQualityGroup, SetQualityGroup
from mzqc.models.quality_metric import QualityMetric

ISO_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


def test_document_defaults():
    doc = MzQCDocument()
    assert ISO_UTC.match(doc.creation_date)
    assert doc.version == DEFAULT_VERSION
    assert doc.controlled_vocabularies == []
    assert doc.run_qualities == []
    assert doc.set_qualities == []


def test_explicit_creation_date_is_kept():
    doc = MzQCDocument(creation_date="2020-01-02T03:04:05Z")
    assert doc.creation_date == "2020-01-02T03:04:05Z"


def test_list_defaults_are_not_shared():
    first = RunQualityGroup(label="a")
    second = RunQualityGroup(label="b")
    first.add_metric(QualityMetric(accession="QC:1"))
    assert second.metrics == []
    assert InputFileDescriptor().file_properties == []
    assert SetQualityGroup().set_refs == []


def test_metric_value_is_wrapped():
    metric = QualityMetric(accession="QC:1", value=[1, 2, 3])
    assert isinstance(metric.value, MetricValue)
    assert metric.value == MetricValue.of([1, 2, 3])
    assert QualityMetric().value.is_null


def test_metric_count():
    doc = MzQCDocument()
    doc.add_run_quality(RunQualityGroup(metrics=[QualityMetric(), QualityMetric()]))
    doc.add_set_quality(SetQualityGroup(metrics=[QualityMetric()]))
    assert doc.metric_count() == 3
