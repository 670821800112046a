import argparse
import logging
from typing import List, Optional

import pandas as pd

from mzqc.core.config import Config
from mzqc.core.mzqc_io import save
from mzqc.core.structural_validator import StructuralValidator
from mzqc.models.mzqc_document import MzQCDocument
from mzqc.models.quality_group import RunQualityGroup
from mzqc.models.quality_metric import QualityMetric


class CsvToMzQC:
    """Turns each row of a delimited table into one QualityMetric of a single run."""

    def __init__(self, config: Config):
        self.config = config
        self.metric_cfg = config.section('metric')

    def read_metrics(self, csv_file: str) -> List[QualityMetric]:
        df = pd.read_csv(csv_file, dtype=str, keep_default_na=False)
        columns = self.metric_cfg.get('columns') or list(df.columns)
        missing = [c for c in columns if c not in df.columns]
        if missing:
            raise ValueError(f"Columns not found in {csv_file}: {missing}")

        metrics = []
        for _, row in df.iterrows():
            metrics.append(QualityMetric(
                accession=self.metric_cfg.get('accession', ""),
                name=self.metric_cfg.get('name', ""),
                description=self.metric_cfg.get('description', ""),
                value={column: row[column] for column in columns},
                unit=self.metric_cfg.get('unit', "")
            ))
        logging.info(f"✅ {csv_file}: {len(metrics)} metrics")
        return metrics

    def build(self, csv_file: str, label: str) -> MzQCDocument:
        run_quality = RunQualityGroup(label=label, metrics=self.read_metrics(csv_file))
        input_file = self.config.create_input_file()
        if input_file is not None:
            run_quality.input_files.append(input_file)
        software = self.config.create_software()
        if software is not None:
            run_quality.analysis_software.append(software)

        document = self.config.create_document()
        document.add_run_quality(run_quality)
        return document

    def run(self, csv_file: str, output_file: str, label: str, schema: Optional[str] = None):
        document = self.build(csv_file, label)
        validator = StructuralValidator(schema_path=schema) if schema else self.config.create_validator()
        save(document, output_file, validator=validator, indent=self.config.output_indent())
        logging.info(f"📟 mzQC file written to: {output_file}")
        return document


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Convert a delimited metrics table into an mzQC file")
    parser.add_argument("--config", required=True, help="Path to YAML config file")
    parser.add_argument("--csv", required=True, help="Path to the comma-delimited metrics table")
    parser.add_argument("--output", default="output.mzqc", help="Path of the mzQC file to write")
    parser.add_argument("--label", default="Example Run", help="Label of the run quality")
    parser.add_argument("--schema", default=None, help="Optional mzQC schema file; enables validation")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    CsvToMzQC(Config(args.config)).run(args.csv, args.output, args.label, args.schema)
