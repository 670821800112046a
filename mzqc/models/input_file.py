from dataclasses import dataclass, field
from typing import List, Optional

from mzqc.models.controlled_vocabulary import CvParameter
from mzqc.shared.util import put_if_present, refill, str_value


@dataclass
class InputFileDescriptor:
    location: str = ""
    name: str = ""
    file_format: Optional[CvParameter] = None
    file_properties: List[CvParameter] = field(default_factory=list)

    def add_file_property(self, prop: CvParameter):
        self.file_properties.append(prop)

    def to_dict(self):
        ret_dict = {}
        ret_dict['location'] = self.location
        ret_dict['name'] = self.name
        if self.file_format is not None:
            ret_dict['fileFormat'] = self.file_format.to_dict()
        put_if_present(ret_dict, 'fileProperties', [prop.to_dict() for prop in self.file_properties])
        return ret_dict

    def update_from_dict(self, data: dict):
        self.location = str_value(data, 'location')
        self.name = str_value(data, 'name')
        file_format = data.get('fileFormat')
        self.file_format = CvParameter.from_dict(file_format) if isinstance(file_format, dict) else None
        refill(self.file_properties, data, 'fileProperties', CvParameter.from_dict)
        return self

    @classmethod
    def from_dict(cls, data: dict):
        return cls().update_from_dict(data)
