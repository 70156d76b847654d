"""Compare two runs of Rust micro-benchmarks."""

__version__ = '0.4.0'

from .comparison import Comparison, compare
from .errors import BenchcmpError, ConfigError, EmptyReportError, ReadError
from .filtering import FilterConfig, Verdict, apply_filters, classify
from .labels import column_labels
from .measurement import Measurement, parse_line
from .pairing import Pairing, pair, split_files, split_prefixes
from .pipeline import Options, Rendered, compare_files, compare_prefixes, render
from .report import parse_report
