from dataclasses import dataclass

from mzqc.shared.util import put_if_present, str_value


@dataclass
class SoftwareDescriptor:
    accession: str = ""
    name: str = ""
    version: str = ""
    uri: str = ""

    def to_dict(self):
        ret_dict = {}
        ret_dict['accession'] = self.accession
        ret_dict['name'] = self.name
        ret_dict['version'] = self.version
        put_if_present(ret_dict, 'uri', self.uri)
        return ret_dict

    def update_from_dict(self, data: dict):
        self.accession = str_value(data, 'accession')
        self.name = str_value(data, 'name')
        self.version = str_value(data, 'version')
        self.uri = str_value(data, 'uri')
        return self

    @classmethod
    def from_dict(cls, data: dict):
        return cls().update_from_dict(data)
