"""Orchestration logic for building the view model from compound dumps."""

import argparse
import logging

from doxyview.compute_config_hash import compute_config_hash
from doxyview.load_compound_defs import DUMP_SUFFIXES, load_compound_defs
from doxyview.load_config import load_config
from doxyview.view_model_report import ViewModelReport
from doxyview.workspace import Workspace

logger = logging.getLogger(__name__)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full pipeline: load, build the workspace, write the report."""
    dump_files = sorted(
        p for p in args.input_dir.rglob("*") if p.suffix.lower() in DUMP_SUFFIXES
    )
    if not dump_files:
        msg = f"No compound dumps found under: {args.input_dir}"
        raise SystemExit(msg)

    config = load_config(args.config)
    root = logging.getLogger()
    if config.get("debug"):
        root.setLevel(logging.DEBUG)
    elif config.get("verbose") and root.getEffectiveLevel() > logging.INFO:
        root.setLevel(logging.INFO)
    report = ViewModelReport(compute_config_hash(config))

    logger.info("Loading %d compound dumps from %s", len(dump_files), args.input_dir)
    compound_defs = load_compound_defs(dump_files)
    workspace = Workspace(config)
    workspace.register_from_parsed_set(compound_defs)

    out_path = args.out.resolve()
    report.generate_report(workspace, out_path)

    print(
        f"Resolved {len(workspace.compounds_by_id)} compounds and "
        f"{len(workspace.members_by_id)} members into: {out_path}"
    )
    return 0
