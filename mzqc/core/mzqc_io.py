import logging
import os
from typing import Optional

from mzqc.constants import DEFAULT_INDENT
from mzqc.core.codec import decode_document, dumps, encode_document, loads
from mzqc.core.exceptions import DocumentIOError
from mzqc.core.structural_validator import StructuralValidator
from mzqc.models.mzqc_document import MzQCDocument

logger = logging.getLogger(__name__)


def load(file_path: str, validator: Optional[StructuralValidator] = None) -> MzQCDocument:
    """
    Read an mzQC file, optionally run the structural validator on the raw
    JSON, and decode it.

    Raises:
        DocumentIOError: the file cannot be read
        ParseError: the file is not a JSON object
        SchemaError: a presence check failed
    """
    path = os.path.expanduser(file_path)
    try:
        with open(path, 'rb') as mzqc_file:
            raw = mzqc_file.read()
    except OSError as err:
        raise DocumentIOError(f"Could not open file: {file_path}", path=file_path) from err

    data = loads(raw)
    if validator is not None:
        validator.validate(data)
    document = decode_document(data)
    logger.info(f"loaded {file_path}: {len(document.run_qualities)} run qualities, "
                f"{len(document.set_qualities)} set qualities")
    return document


def save(document: MzQCDocument, file_path: str, validator: Optional[StructuralValidator] = None,
         indent: int = DEFAULT_INDENT):
    """
    Encode a document and write it, validating first when a validator is
    given. Nothing is written if validation fails.
    """
    data = encode_document(document)
    if validator is not None:
        validator.validate(data)
    text = dumps(data, indent=indent)

    path = os.path.expanduser(file_path)
    try:
        with open(path, 'w', encoding='utf-8') as mzqc_file:
            mzqc_file.write(text)
    except OSError as err:
        raise DocumentIOError(f"Could not open file for writing: {file_path}", path=file_path) from err
    logger.info(f"wrote {file_path}")
