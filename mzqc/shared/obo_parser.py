import logging
from typing import Generator, Iterable, Optional

from mzqc.constants import HAS_UNITS, HAS_VALUE_TYPE, OBO_COMMENT, TERM_MARKER
from mzqc.models.term import TermDetails

logger = logging.getLogger(__name__)


class OboParser:
    """
    Best-effort line scanner for OBO-like ontology files.

    Only ``[Term]`` stanzas are read, one ``key: value`` per line. Multi-line
    values, escapes and trailing modifiers are not interpreted; values are
    kept as written apart from surrounding whitespace.
    """

    @staticmethod
    def _apply_relationship(term: TermDetails, value: str):
        term.relationships.append(value)
        parts = value.split(None, 1)
        if len(parts) < 2:
            return
        rel_type, target = parts
        if rel_type == HAS_VALUE_TYPE:
            term.value_type = target
        elif rel_type == HAS_UNITS:
            term.unit = target

    def _apply_line(self, term: TermDetails, line: str):
        if line.startswith("id:"):
            term.accession = line[3:].strip()
        elif line.startswith("name:"):
            term.name = line[5:].strip()
        elif line.startswith("def:"):
            term.definition = line[4:].strip()
        elif line.startswith("is_a:"):
            term.parent_terms.append(line[5:].strip())
        elif line.startswith("relationship:"):
            self._apply_relationship(term, line[13:].strip())

    def parse_lines(self, lines: Iterable[str]) -> Generator[TermDetails, None, None]:
        current_term: Optional[TermDetails] = None
        for raw_line in lines:
            line = raw_line.rstrip("\r\n")
            if line.strip() == "" or line.startswith(OBO_COMMENT):
                continue

            if line.startswith("["):
                if current_term is not None:
                    if current_term.accession:
                        yield current_term
                    else:
                        logger.warning("skipping [Term] block without an id")
                current_term = TermDetails() if line.strip() == TERM_MARKER else None
                continue

            if current_term is None:
                continue
            self._apply_line(current_term, line)

        if current_term is not None:
            if current_term.accession:
                yield current_term
            else:
                logger.warning("skipping [Term] block without an id")

    def parse_text(self, text: str) -> Generator[TermDetails, None, None]:
        return self.parse_lines(text.splitlines())
