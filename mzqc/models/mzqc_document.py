from dataclasses import dataclass, field
from typing import List

from mzqc.constants import DEFAULT_VERSION, ROOT_KEY
from mzqc.models.controlled_vocabulary import CvReference
from mzqc.models.quality_group import RunQualityGroup, SetQualityGroup
from mzqc.shared.util import as_text, current_iso_time, put_if_present, refill, str_value


@dataclass
class MzQCDocument:
    """
    Root of an mzQC document.

    ``creation_date`` is an ISO-8601 UTC timestamp; when left empty it is
    filled in from the current time.
    """
    creation_date: str = ""
    version: str = DEFAULT_VERSION
    contact_name: str = ""
    contact_address: str = ""
    description: str = ""
    controlled_vocabularies: List[CvReference] = field(default_factory=list)
    run_qualities: List[RunQualityGroup] = field(default_factory=list)
    set_qualities: List[SetQualityGroup] = field(default_factory=list)

    def __post_init__(self):
        if not self.creation_date:
            self.creation_date = current_iso_time()

    def add_controlled_vocabulary(self, cv: CvReference):
        self.controlled_vocabularies.append(cv)

    def add_run_quality(self, run_quality: RunQualityGroup):
        self.run_qualities.append(run_quality)

    def add_set_quality(self, set_quality: SetQualityGroup):
        self.set_qualities.append(set_quality)

    def metric_count(self) -> int:
        return sum(len(rq.metrics) for rq in self.run_qualities) + \
            sum(len(sq.metrics) for sq in self.set_qualities)

    def to_dict(self):
        inner = {}
        inner['version'] = self.version
        inner['creationDate'] = self.creation_date
        put_if_present(inner, 'contactName', self.contact_name)
        put_if_present(inner, 'contactAddress', self.contact_address)
        put_if_present(inner, 'description', self.description)
        put_if_present(inner, 'controlledVocabularies', [cv.to_dict() for cv in self.controlled_vocabularies])
        put_if_present(inner, 'runQualities', [rq.to_dict() for rq in self.run_qualities])
        put_if_present(inner, 'setQualities', [sq.to_dict() for sq in self.set_qualities])
        return {ROOT_KEY: inner}

    def update_from_dict(self, data: dict):
        # producers may leave out the root key
        inner = data.get(ROOT_KEY) if isinstance(data.get(ROOT_KEY), dict) else data

        creation_date = inner.get('creationDate')
        self.creation_date = as_text(creation_date) if creation_date is not None else current_iso_time()
        self.version = str_value(inner, 'version')
        self.contact_name = str_value(inner, 'contactName')
        self.contact_address = str_value(inner, 'contactAddress')
        self.description = str_value(inner, 'description')

        refill(self.controlled_vocabularies, inner, 'controlledVocabularies', CvReference.from_dict)
        refill(self.run_qualities, inner, 'runQualities', RunQualityGroup.from_dict)
        refill(self.set_qualities, inner, 'setQualities', SetQualityGroup.from_dict)
        return self

    @classmethod
    def from_dict(cls, data: dict):
        return cls().update_from_dict(data)
