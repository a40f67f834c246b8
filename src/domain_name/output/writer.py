"""CSV and optional Excel output writer.

Primary output is CSV files (tidy, analysis-ready).
Excel is optional and generated from CSVs if enabled.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Dict, Any, Optional

import pandas as pd

from ..util.types import DetectionResult
from ..util.io import write_csv, write_json, ensure_dir

logger = logging.getLogger(__name__)

DETECTION_FIELDS = [
    'name', 'valid', 'hosts', 'domain_label', 'top_level_domains',
    'reason_code', 'message', 'duration_ms', 'timestamp',
]


class ReportWriter:
    """Writes batch detection results to disk in CSV and optional Excel format.

    Output structure:
      out/<date>/<timestamp>/
        detections.csv       # One row per input name
        rejections.csv       # Invalid names only, with reason codes
        run_metadata.json    # Config and summary counts
        summary.xlsx         # Optional Excel workbook
    """

    def __init__(self, out_dir: str = "out", enable_excel: bool = False, run_dir: Optional[Path] = None):
        """Initialize writer with output directory.

        Args:
            out_dir: Base output directory (default: 'out')
            enable_excel: Whether to generate Excel summary (default: False)
            run_dir: Explicit run directory to use (overrides auto-creation)
        """
        self.enable_excel = enable_excel

        if run_dir:
            self.run_dir = Path(run_dir)
        else:
            stamp = datetime.now(timezone.utc)
            self.run_dir = Path(out_dir) / stamp.strftime("%Y-%m-%d") / stamp.strftime("%Y%m%d_%H%M%S")
        ensure_dir(self.run_dir)

        logger.info(f"Output directory: {self.run_dir}")

    def write_all(self,
                  results: List[DetectionResult],
                  summary: Dict[str, Any],
                  run_metadata: Dict[str, Any]) -> None:
        """Write all output files.

        Args:
            results: Detection results, in input order
            summary: Aggregated counts from batch.summarize()
            run_metadata: Configuration and timing info
        """
        logger.info("Writing output files...")

        self._write_detections(results)
        self._write_rejections(results)
        self._write_metadata(run_metadata, summary)

        if self.enable_excel:
            self._write_excel(summary)

        logger.info(f"Output written to {self.run_dir}")

    def _write_detections(self, results: List[DetectionResult]) -> None:
        """Write one row per input name."""
        rows = [result.to_dict() for result in results]
        output_file = self.run_dir / "detections.csv"
        write_csv(output_file, rows, fieldnames=DETECTION_FIELDS)
        logger.info(f"Wrote {len(rows)} detections to {output_file.name}")

    def _write_rejections(self, results: List[DetectionResult]) -> None:
        """Write invalid names only - quicker to review than the full list."""
        rows = [
            {
                'name': r.name,
                'reason_code': r.reason_code.value if r.reason_code else '',
                'category': r.reason_code.category if r.reason_code else '',
                'message': r.message,
            }
            for r in results if not r.valid
        ]
        output_file = self.run_dir / "rejections.csv"
        write_csv(output_file, rows, fieldnames=['name', 'reason_code', 'category', 'message'])
        logger.info(f"Wrote {len(rows)} rejections to {output_file.name}")

    def _write_metadata(self, metadata: Dict[str, Any], summary: Dict[str, Any]) -> None:
        """Write run metadata and summary counts."""
        output_file = self.run_dir / "run_metadata.json"
        write_json(output_file, {**metadata, 'summary': summary})
        logger.info(f"Wrote metadata to {output_file.name}")

    def _write_excel(self, summary: Dict[str, Any]) -> None:
        """Write Excel summary workbook (optional).

        Only called if enable_excel=True.
        Creates workbook from the CSVs using pandas + openpyxl.
        """
        output_file = self.run_dir / "summary.xlsx"

        with pd.ExcelWriter(output_file, engine='openpyxl') as writer:
            det_df = pd.read_csv(self.run_dir / "detections.csv", dtype=str, keep_default_na=False)
            det_df.to_excel(writer, sheet_name='Detections', index=False)

            rej_df = pd.read_csv(self.run_dir / "rejections.csv", dtype=str, keep_default_na=False)
            rej_df.to_excel(writer, sheet_name='Rejections', index=False)

            counts = {k: v for k, v in summary.items() if not isinstance(v, dict)}
            summary_df = pd.DataFrame({
                'Metric': list(counts.keys()),
                'Value': list(counts.values()),
            })
            summary_df.to_excel(writer, sheet_name='Summary', index=False)

            reasons = summary.get('reasons', {})
            reasons_df = pd.DataFrame({
                'Reason': list(reasons.keys()),
                'Count': list(reasons.values()),
            })
            reasons_df.to_excel(writer, sheet_name='Reasons', index=False)

        logger.info(f"Wrote Excel summary to {output_file.name}")
