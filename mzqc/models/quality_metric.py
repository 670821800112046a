from dataclasses import dataclass, field
from typing import Any

from mzqc.models.metric_value import MetricValue
from mzqc.shared.util import put_if_present, str_value


@dataclass
class QualityMetric:
    """
    One QC measurement, identified by a CV accession.

    ``value`` may be any JSON shape: a scalar, a list, or a nested object.
    Raw Python values are wrapped into a MetricValue on construction.
    """
    accession: str = ""
    name: str = ""
    description: str = ""
    value: Any = field(default_factory=MetricValue.null)
    unit: str = ""

    def __post_init__(self):
        self.value = MetricValue.of(self.value)

    def to_dict(self):
        ret_dict = {}
        ret_dict['accession'] = self.accession
        ret_dict['name'] = self.name
        put_if_present(ret_dict, 'description', self.description)
        value = MetricValue.of(self.value)
        if not value.is_null:
            ret_dict['value'] = value.to_json()
        put_if_present(ret_dict, 'unit', self.unit)
        return ret_dict

    def update_from_dict(self, data: dict):
        self.accession = str_value(data, 'accession')
        self.name = str_value(data, 'name')
        self.description = str_value(data, 'description')
        self.value = MetricValue.from_json(data.get('value'))
        self.unit = str_value(data, 'unit')
        return self

    @classmethod
    def from_dict(cls, data: dict):
        return cls().update_from_dict(data)
