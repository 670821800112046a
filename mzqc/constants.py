ROOT_KEY = "mzQC"
DEFAULT_VERSION = "1.0.0"
ISO_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
DEFAULT_INDENT = 2

TERM_MARKER = "[Term]"
OBO_COMMENT = "!"

HAS_VALUE_TYPE = "has_value_type"
HAS_UNITS = "has_units"
