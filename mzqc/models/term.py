from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TermDetails:
    accession: str = ""
    name: str = ""
    definition: str = ""
    relationships: List[str] = field(default_factory=list)
    parent_terms: List[str] = field(default_factory=list)
    value_type: Optional[str] = None
    unit: Optional[str] = None
