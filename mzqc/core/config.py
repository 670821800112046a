import logging
import os
from typing import List, Optional

import yaml

from mzqc.constants import DEFAULT_INDENT, DEFAULT_VERSION
from mzqc.core.structural_validator import StructuralValidator
from mzqc.models.controlled_vocabulary import CvParameter, CvReference
from mzqc.models.input_file import InputFileDescriptor
from mzqc.models.mzqc_document import MzQCDocument
from mzqc.models.software import SoftwareDescriptor

logger = logging.getLogger(__name__)


def _is_yaml_path(value) -> bool:
    return isinstance(value, str) and (value.endswith(".yaml") or value.endswith(".yml"))


class Config:
    config_dict: dict
    yaml_files: list

    def __init__(self, yaml_file_or_dict):
        self.yaml_files = []
        if isinstance(yaml_file_or_dict, dict):
            self.config_dict = self._load_nested_yamls(yaml_file_or_dict)
        else:
            self.config_dict = self.load_config_from_yaml(yaml_file_or_dict)

    def load_config_from_yaml(self, file_path):
        config_dict = self.load_one_yaml(file_path)
        config_dict = self._load_nested_yamls(config_dict)
        logger.info(f"Configuration loaded from yaml file(s): {', '.join(self.yaml_files)}")
        return config_dict

    def load_one_yaml(self, yaml_file):
        with open(os.path.expanduser(yaml_file), "r") as file:
            config_dict = yaml.safe_load(file) or {}
            self.yaml_files.append(yaml_file)
            return config_dict

    def _load_nested_yamls(self, config_node):
        if _is_yaml_path(config_node):
            return self._load_nested_yamls(self.load_one_yaml(config_node))
        if isinstance(config_node, dict):
            for key, value in config_node.items():
                config_node[key] = self._load_nested_yamls(value)
        if isinstance(config_node, list):
            for index, entry in enumerate(config_node):
                config_node[index] = self._load_nested_yamls(entry)
        return config_node

    def __repr__(self):
        return f"{self.__class__.__name__}({self.config_dict})"

    def section(self, key: str) -> dict:
        return self.config_dict.get(key) or {}

    def create_document(self) -> MzQCDocument:
        doc_config = self.section('document')
        document = MzQCDocument(
            version=str(doc_config.get('version', DEFAULT_VERSION)),
            contact_name=doc_config.get('contact_name', ""),
            contact_address=doc_config.get('contact_address', ""),
            description=doc_config.get('description', "")
        )
        for cv in self.create_controlled_vocabularies():
            document.add_controlled_vocabulary(cv)
        return document

    def create_controlled_vocabularies(self) -> List[CvReference]:
        return [
            CvReference(
                id=entry.get('id', ""),
                name=entry.get('name', ""),
                uri=entry.get('uri', ""),
                version=str(entry.get('version', ""))
            )
            for entry in self.config_dict.get('controlled_vocabularies') or []
        ]

    def create_software(self) -> Optional[SoftwareDescriptor]:
        sw_config = self.section('software')
        if not sw_config:
            return None
        return SoftwareDescriptor(
            accession=sw_config.get('accession', ""),
            name=sw_config.get('name', ""),
            version=str(sw_config.get('version', "")),
            uri=sw_config.get('uri', "")
        )

    def create_input_file(self) -> Optional[InputFileDescriptor]:
        file_config = self.section('input_file')
        if not file_config:
            return None
        file_format = None
        if file_config.get('file_format'):
            fmt = file_config['file_format']
            file_format = CvParameter(
                accession=fmt.get('accession', ""),
                name=fmt.get('name', ""),
                value=str(fmt.get('value', "")),
                cv_ref=fmt.get('cv_ref', "")
            )
        return InputFileDescriptor(
            location=file_config.get('location', ""),
            name=file_config.get('name', ""),
            file_format=file_format
        )

    def create_validator(self) -> Optional[StructuralValidator]:
        validation = self.section('validation')
        if not validation.get('enabled', bool(validation)):
            return None
        return StructuralValidator(schema_path=validation.get('schema'))

    def output_indent(self) -> int:
        return int(self.section('output').get('indent', DEFAULT_INDENT))
