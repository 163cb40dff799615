"""
Report Builder Module
Writes the curation artifacts: JSON pair lists and an optional HTML report via Jinja2.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.curator import CurationResult
from utils.file_utils import ensure_directory, write_json

logger = logging.getLogger(__name__)

ALL_PAIRS_FILENAME = 'all-pairs-dist.json'
PAIRS_FILENAME = 'pairs.json'
HTML_REPORT_FILENAME = 'report.html'
TEMPLATES_DIR = Path(__file__).parent / 'templates'


class ReportBuilder:
    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATES_DIR)),
                               autoescape=select_autoescape(['html', 'j2']))
        self.template = None
        self.data = {}

    def collect_metrics(self, result: CurationResult, threshold: float) -> Dict:
        """Collect and organize curation metrics."""
        self.data = {
            'threshold': threshold,
            'summary': {
                'selectors_a': len(result.styles_a),
                'selectors_b': len(result.styles_b),
                'classes_a': len(result.classes_a),
                'classes_b': len(result.classes_b),
                'matched_classes': len(result.pairs),
                'skipped_pairs': len(result.skipped_pairs),
            },
            'accepted': [m for m in result.matches if m.class_a in result.pairs],
            'rejected': result.rejected_matches,
            'skipped': result.skipped_pairs,
        }
        return self.data

    def generate_json_report(self, result: CurationResult) -> Dict[str, Path]:
        """Write the all-pairs triple list and the filtered pairs mapping."""
        all_pairs_path = self.output_dir / ALL_PAIRS_FILENAME
        pairs_path = self.output_dir / PAIRS_FILENAME
        write_json(all_pairs_path, [list(triple) for triple in result.all_pairs])
        write_json(pairs_path, result.pairs)
        logger.info("Wrote %s and %s", all_pairs_path, pairs_path)
        return {'all_pairs': all_pairs_path, 'pairs': pairs_path}

    def generate_html_report(self, result: CurationResult, threshold: float,
                             output_path: Optional[Path] = None) -> Path:
        """Render the HTML report with summary counts and matches."""
        output_path = Path(output_path) if output_path else self.output_dir / HTML_REPORT_FILENAME
        ensure_directory(output_path.parent)
        self.template = self.env.get_template('report.html.j2')
        html = self.template.render(**self.collect_metrics(result, threshold))
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(html)
        logger.info("Wrote %s", output_path)
        return output_path
