import yaml

from mzqc.core.config import Config


def write_yaml(path, data):
    with open(path, "w") as f:
        yaml.safe_dump(data, f)
    return str(path)


def test_nested_yaml_is_loaded(tmp_path):
    cv_file = write_yaml(tmp_path / "cvs.yaml", [
        {"id": "PSI-MS", "name": "PSI-MS CV", "uri": "https://example.org/psi-ms.obo", "version": "4.1.55"}
    ])
    main_file = write_yaml(tmp_path / "main.yaml", {
        "document": {"version": "1.0.0", "contact_name": "Contact Name"},
        "controlled_vocabularies": cv_file,
    })

    config = Config(main_file)
    assert config.yaml_files == [main_file, cv_file]

    document = config.create_document()
    assert document.contact_name == "Contact Name"
    assert [cv.id for cv in document.controlled_vocabularies] == ["PSI-MS"]


def test_builders_from_dict():
    config = Config({
        "software": {"accession": "MS:1000799", "name": "custom tool", "version": 1.0},
        "input_file": {
            "location": "file:///path/to/input.mzML",
            "name": "input.mzML",
            "file_format": {"accession": "MS:1000584", "name": "mzML format", "cv_ref": "PSI-MS"},
        },
        "output": {"indent": 4},
    })
    software = config.create_software()
    assert software.version == "1.0"
    assert software.uri == ""

    input_file = config.create_input_file()
    assert input_file.file_format.cv_ref == "PSI-MS"
    assert input_file.file_properties == []
    assert config.output_indent() == 4


def test_empty_sections():
    config = Config({})
    assert config.create_software() is None
    assert config.create_input_file() is None
    assert config.create_validator() is None
    assert config.output_indent() == 2
    assert config.create_document().controlled_vocabularies == []


def test_validation_section():
    assert Config({"validation": {"enabled": True}}).create_validator() is not None
    assert Config({"validation": {"enabled": False}}).create_validator() is None
    validator = Config({"validation": {"schema": "schema.json"}}).create_validator()
    assert validator.schema_path == "schema.json"
