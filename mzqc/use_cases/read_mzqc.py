import argparse
import logging
import sys
from typing import List, Optional

from mzqc.core.exceptions import MzQCError
from mzqc.core.mzqc_io import load
from mzqc.core.structural_validator import StructuralValidator
from mzqc.interfaces.simple_enum import ValueKind
from mzqc.models.metric_value import MetricValue
from mzqc.models.mzqc_document import MzQCDocument
from mzqc.models.quality_metric import QualityMetric

_INLINE_LIST_LIMIT = 10
_SCALAR_KINDS = {ValueKind.Boolean, ValueKind.Integer, ValueKind.Float, ValueKind.String}


def format_metric_value(value: MetricValue, indent: int = 0) -> str:
    pad = " " * indent
    kind = value.kind
    if kind == ValueKind.Null:
        return "null"
    if kind == ValueKind.Boolean:
        return "true" if value.data else "false"
    if kind == ValueKind.Integer:
        return str(value.data)
    if kind == ValueKind.Float:
        return f"{value.data:.4f}"
    if kind == ValueKind.String:
        return f'"{value.data}"'
    if kind == ValueKind.List:
        items = value.data
        if not items:
            return "[]"
        if len(items) == 1:
            return f"[ {format_metric_value(items[0])} ]"
        if len(items) <= _INLINE_LIST_LIMIT and items[0].kind in _SCALAR_KINDS:
            return "[ " + ", ".join(format_metric_value(item) for item in items) + " ]"
        lines = [f"{pad}  {format_metric_value(item, indent + 2)}" for item in items]
        return "[\n" + ",\n".join(lines) + f"\n{pad}]"
    if not value.data:
        return "{}"
    lines = [f'{pad}  "{key}": {format_metric_value(item, indent + 2)}' for key, item in value.data.items()]
    return "{\n" + ",\n".join(lines) + f"\n{pad}}}"


def format_metric(index: int, metric: QualityMetric) -> str:
    line = f"  [{index}] {metric.name}"
    if metric.accession:
        line += f" ({metric.accession})"
    if metric.unit:
        line += f" [{metric.unit}]"
    return f"{line} = {format_metric_value(metric.value)}"


def summarize(document: MzQCDocument) -> List[str]:
    lines = [
        "===== mzQC File Info =====",
        f"Version: {document.version}",
        f"Creation date: {document.creation_date}",
        "",
        "===== File Contents =====",
        f"Run qualities: {len(document.run_qualities)}",
        f"Set qualities: {len(document.set_qualities)}",
        f"Input files: {sum(len(rq.input_files) for rq in document.run_qualities)}",
        f"Total quality metrics: {document.metric_count()}",
    ]

    if document.run_qualities:
        lines += ["", "===== Run Quality Metrics ====="]
        for i, run in enumerate(document.run_qualities, start=1):
            lines.append(f"Run {i} ({run.label}): {len(run.metrics)} metrics")
            lines += [format_metric(j, m) for j, m in enumerate(run.metrics, start=1)]

    if document.set_qualities:
        lines += ["", "===== Set Quality Metrics ====="]
        for i, set_quality in enumerate(document.set_qualities, start=1):
            lines.append(f"Set {i} ({set_quality.label}): {len(set_quality.metrics)} metrics")
            lines += [format_metric(j, m) for j, m in enumerate(set_quality.metrics, start=1)]
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print a summary of an mzQC file")
    parser.add_argument("mzqc_file", help="Path to the mzQC file to read")
    parser.add_argument("--schema", default=None, help="Optional mzQC schema file added to the default presence checks")
    parser.add_argument("--no-validate", action="store_true", help="Skip the structural presence checks")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    validator = None if args.no_validate else StructuralValidator(schema_path=args.schema)
    try:
        document = load(args.mzqc_file, validator=validator)
    except MzQCError as err:
        logging.error(f"Error: {err}")
        return 1

    print("\n".join(summarize(document)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
