"""Command line entrypoint: detect domain names from arguments or a file.

Examples:
  domain-name foobar.com www.foobar.com.cn
  domain-name --domains-file names.txt --workers 8 --output-dir out --excel
  domain-name --json download.file.foobar.com

Exit status: 0 if every name is valid, 1 if any is invalid,
2 on usage errors or when the TLD list cannot be loaded.
"""

import argparse
import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from . import __version__
from .batch import detect_many, summarize
from .errors import DataSourceError
from .output.writer import ReportWriter
from .registry import TLDRegistry, default_registry, load
from .util.env import load_config
from .util.io import read_text_lines
from .util.log import setup_logging
from .util.types import DetectionResult

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='domain-name',
        description='Validate domain names and split them into hosts, domain label and TLDs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  domain-name foobar.com www.foobar.com.cn
  domain-name --domains-file names.txt --workers 8 --output-dir out --excel
        """
    )
    parser.add_argument('names', nargs='*', help='Domain names to detect')
    parser.add_argument('--domains-file', help='File containing one domain name per line')
    parser.add_argument('--tlds-file', help='TLD list to validate against (default: bundled list)')
    parser.add_argument('--report', action='store_true', help='Write CSV/JSON reports under OUT_DIR')
    parser.add_argument('--output-dir', default=None, help='Report directory (overrides OUT_DIR, implies --report)')
    parser.add_argument('--excel', action='store_true', default=None, help='Also write summary.xlsx (needs --report)')
    parser.add_argument('--workers', type=int, default=None, help='Worker threads for batch detection')
    parser.add_argument('--json', action='store_true', help='Print results as JSON')
    parser.add_argument('--progress', action='store_true', help='Show a progress bar')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def _format_line(result: DetectionResult) -> str:
    if not result.valid:
        return f"INVALID {result.name}: {result.message}"
    domain = result.domain
    hosts = ','.join(domain.hosts) or '-'
    tlds = ','.join(domain.top_level_domains)
    return f"OK {result.name} hosts={hosts} domain={domain.domain_label} tlds={tlds}"


def _load_registry(tlds_file: Optional[str]) -> TLDRegistry:
    if tlds_file:
        return load(tlds_file)
    return default_registry()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_ERROR

    level = 'DEBUG' if args.verbose else config.log_level
    setup_logging(Path(config.log_file) if config.log_file else None, level)

    names = list(args.names)
    if args.domains_file:
        try:
            names.extend(read_text_lines(Path(args.domains_file)))
        except OSError as e:
            logger.error(f"Could not read domains file: {e}")
            return EXIT_ERROR

    if not names:
        parser.print_usage(sys.stderr)
        print("domain-name: error: provide at least one name or --domains-file", file=sys.stderr)
        return EXIT_ERROR

    tlds_file = args.tlds_file or config.tlds_file
    try:
        registry = _load_registry(tlds_file)
    except DataSourceError as e:
        logger.error(str(e))
        return EXIT_ERROR

    workers = args.workers if args.workers is not None else config.workers
    started_at = datetime.now(timezone.utc)
    start = time.perf_counter()
    results = detect_many(names, registry=registry, workers=workers, progress=args.progress)
    summary = summarize(results)

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
    else:
        for result in results:
            print(_format_line(result))

    output_dir = args.output_dir or (config.out_dir if args.report else None)
    if output_dir:
        enable_excel = args.excel if args.excel is not None else config.enable_excel
        writer = ReportWriter(out_dir=output_dir, enable_excel=enable_excel)
        writer.write_all(results, summary, {
            'started_at': started_at.isoformat(),
            'duration_ms': round((time.perf_counter() - start) * 1000, 2),
            'tlds_count': len(registry),
            'config': {**config.to_dict(), 'tlds_file': tlds_file or 'bundled', 'workers': workers},
        })
    elif args.excel:
        logger.warning("--excel ignored without --report or --output-dir")

    return EXIT_OK if summary['invalid'] == 0 else EXIT_INVALID


if __name__ == '__main__':
    sys.exit(main())
