from dataclasses import dataclass, field
from typing import List

from mzqc.models.input_file import InputFileDescriptor
from mzqc.models.quality_metric import QualityMetric
from mzqc.models.software import SoftwareDescriptor
from mzqc.shared.util import refill, str_list_value, str_value


@dataclass
class RunQualityGroup:
    """QC metrics for a single analytical run."""
    label: str = ""
    input_files: List[InputFileDescriptor] = field(default_factory=list)
    analysis_software: List[SoftwareDescriptor] = field(default_factory=list)
    metrics: List[QualityMetric] = field(default_factory=list)

    def add_metric(self, metric: QualityMetric):
        self.metrics.append(metric)

    def to_dict(self):
        ret_dict = {}
        ret_dict['label'] = self.label
        ret_dict['inputFiles'] = [f.to_dict() for f in self.input_files]
        ret_dict['analysisSoftware'] = [s.to_dict() for s in self.analysis_software]
        ret_dict['metrics'] = [m.to_dict() for m in self.metrics]
        return ret_dict

    def update_from_dict(self, data: dict):
        self.label = str_value(data, 'label')
        refill(self.input_files, data, 'inputFiles', InputFileDescriptor.from_dict)
        refill(self.analysis_software, data, 'analysisSoftware', SoftwareDescriptor.from_dict)
        refill(self.metrics, data, 'metrics', QualityMetric.from_dict)
        return self

    @classmethod
    def from_dict(cls, data: dict):
        return cls().update_from_dict(data)


@dataclass
class SetQualityGroup:
    """
    QC metrics aggregated over a named set of runs.

    ``set_refs`` are free-form labels; they are not checked against the
    labels of the document's run or set qualities.
    """
    label: str = ""
    set_refs: List[str] = field(default_factory=list)
    metrics: List[QualityMetric] = field(default_factory=list)

    def add_metric(self, metric: QualityMetric):
        self.metrics.append(metric)

    def to_dict(self):
        ret_dict = {}
        ret_dict['label'] = self.label
        ret_dict['setRefs'] = list(self.set_refs)
        ret_dict['metrics'] = [m.to_dict() for m in self.metrics]
        return ret_dict

    def update_from_dict(self, data: dict):
        self.label = str_value(data, 'label')
        self.set_refs[:] = str_list_value(data, 'setRefs')
        refill(self.metrics, data, 'metrics', QualityMetric.from_dict)
        return self

    @classmethod
    def from_dict(cls, data: dict):
        return cls().update_from_dict(data)
