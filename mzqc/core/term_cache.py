import logging
import os
from typing import Dict, Iterator, Optional

from mzqc.core.exceptions import DocumentIOError
from mzqc.models.controlled_vocabulary import CvParameter
from mzqc.models.quality_metric import QualityMetric
from mzqc.models.term import TermDetails
from mzqc.shared.obo_parser import OboParser

logger = logging.getLogger(__name__)


class TermCache:
    """
    Accession -> TermDetails lookup built from one ontology source.

    Every load replaces the previous content. When an accession is defined
    more than once, the last definition wins.
    """
    source_file: Optional[str]
    terms: Dict[str, TermDetails]

    def __init__(self, parser: OboParser = None):
        self.parser = parser or OboParser()
        self.source_file = None
        self.terms = {}

    def load(self, text: str) -> int:
        terms = {}
        for term in self.parser.parse_text(text):
            terms[term.accession] = term
        self.terms = terms
        logger.debug(f"term cache holds {len(self.terms)} terms")
        return len(self.terms)

    def load_from_obo_file(self, file_path: str) -> int:
        path = os.path.expanduser(file_path)
        try:
            with open(path, 'r', encoding='utf-8') as obo_file:
                text = obo_file.read()
        except (OSError, UnicodeDecodeError) as err:
            raise DocumentIOError(f"Could not read ontology file: {file_path}", path=file_path) from err
        count = self.load(text)
        self.source_file = file_path
        logger.info(f"loaded {count} terms from {file_path}")
        return count

    def get(self, accession: str) -> Optional[TermDetails]:
        return self.terms.get(accession)

    def __getitem__(self, accession: str) -> TermDetails:
        return self.terms[accession]

    def __contains__(self, accession: str) -> bool:
        return accession in self.terms

    def __len__(self):
        return len(self.terms)

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)

    def cv_parameter(self, accession: str, value: str = "", cv_ref: str = "") -> CvParameter:
        term = self[accession]
        return CvParameter(accession=term.accession, name=term.name, value=value, cv_ref=cv_ref)

    def quality_metric(self, accession: str, value=None, unit: str = None) -> QualityMetric:
        term = self[accession]
        return QualityMetric(
            accession=term.accession,
            name=term.name,
            description=term.definition,
            value=value,
            unit=unit if unit is not None else (term.unit or "")
        )
