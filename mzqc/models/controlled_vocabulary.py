from dataclasses import dataclass

from mzqc.shared.util import put_if_present, str_value


@dataclass
class CvReference:
    """A controlled vocabulary source, e.g. one release of the PSI-MS ontology."""
    id: str = ""
    name: str = ""
    uri: str = ""
    version: str = ""

    def to_dict(self):
        ret_dict = {}
        ret_dict['id'] = self.id
        ret_dict['name'] = self.name
        ret_dict['uri'] = self.uri
        ret_dict['version'] = self.version
        return ret_dict

    def update_from_dict(self, data: dict):
        self.id = str_value(data, 'id')
        self.name = str_value(data, 'name')
        self.uri = str_value(data, 'uri')
        self.version = str_value(data, 'version')
        return self

    @classmethod
    def from_dict(cls, data: dict):
        return cls().update_from_dict(data)


@dataclass
class CvParameter:
    accession: str = ""
    name: str = ""
    value: str = ""
    cv_ref: str = ""

    def to_dict(self):
        ret_dict = {}
        ret_dict['accession'] = self.accession
        ret_dict['name'] = self.name
        put_if_present(ret_dict, 'value', self.value)
        put_if_present(ret_dict, 'cvRef', self.cv_ref)
        return ret_dict

    def update_from_dict(self, data: dict):
        self.accession = str_value(data, 'accession')
        self.name = str_value(data, 'name')
        self.value = str_value(data, 'value')
        self.cv_ref = str_value(data, 'cvRef')
        return self

    @classmethod
    def from_dict(cls, data: dict):
        return cls().update_from_dict(data)
