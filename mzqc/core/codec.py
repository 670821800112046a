import json
from typing import Union

from mzqc.constants import DEFAULT_INDENT
from mzqc.core.exceptions import ParseError
from mzqc.models.mzqc_document import MzQCDocument


def encode_document(document: MzQCDocument) -> dict:
    return document.to_dict()


def decode_document(data: dict) -> MzQCDocument:
    if not isinstance(data, dict):
        raise ParseError(f"mzQC document must be a JSON object, got {type(data).__name__}")
    return MzQCDocument.from_dict(data)


def dumps(data: Union[MzQCDocument, dict], indent: int = DEFAULT_INDENT) -> str:
    if isinstance(data, MzQCDocument):
        data = encode_document(data)
    try:
        return json.dumps(data, indent=indent, ensure_ascii=False)
    except RecursionError as err:
        raise ParseError("mzQC document is nested too deeply to encode") from err


def loads(text: Union[str, bytes]) -> dict:
    """Parse wire bytes into a JSON object without decoding it into the model."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise ParseError(f"Error parsing JSON: {err}") from err
    except RecursionError as err:
        raise ParseError("mzQC document is nested too deeply to parse") from err
    if not isinstance(data, dict):
        raise ParseError(f"mzQC document must be a JSON object, got {type(data).__name__}")
    return data
