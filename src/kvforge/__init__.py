"""kvforge: benchmark workload codec for key-value stores."""

from __future__ import annotations

from kvforge.codec.generator import clone_template, generate_message, method_name
from kvforge.commands.scripting import script_sha1
from kvforge.params.template import Parameter, extract_parameter
from kvforge.session.bootstrap import build_bootstrap
from kvforge.session.classifier import ResponseOutcome, ResponseParser, classify
from kvforge.workload.extractor import extract_workload, load_config
from kvforge.workload.loader import load_config_file
from kvforge.workload.models import ProtocolSessionConfig, Workload

__version__ = "0.1.0"

__all__ = [
    "Parameter",
    "ProtocolSessionConfig",
    "ResponseOutcome",
    "ResponseParser",
    "Workload",
    "build_bootstrap",
    "classify",
    "clone_template",
    "extract_parameter",
    "extract_workload",
    "generate_message",
    "load_config",
    "load_config_file",
    "method_name",
    "script_sha1",
]
