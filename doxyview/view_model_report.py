"""Logic for writing a JSON summary of the built view model."""

import json
import time
from pathlib import Path
from typing import Any

from doxyview.alphabetical_index import IndexGroup
from doxyview.workspace import Workspace


class ViewModelReport:
    """Collects permalinks, navigation and indices of a workspace into JSON."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.start_time = time.time()

    def build(self, workspace: Workspace) -> dict[str, Any]:
        """Return the report as a JSON-ready dictionary."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_compounds": len(workspace.compounds_by_id),
                "total_members": len(workspace.members_by_id),
            },
            "main_page": workspace.main_page.id if workspace.main_page else None,
            "permalinks": {
                cid: workspace.get_page_permalink(cid)
                for cid in workspace.compounds_by_id
            },
            "navigation": {
                name: [node.to_dict() for node in nodes]
                for name, nodes in workspace.build_navigation().items()
            },
            "indices": {
                collection: {
                    listing: _groups_to_json(groups)
                    for listing, groups in listings.items()
                }
                for collection, listings in workspace.build_indices().items()
            },
            "stats": workspace.stats(),
        }

    def generate_report(self, workspace: Workspace, path: Path) -> None:
        """Write the report to a JSON file."""
        report = self.build(workspace)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(report, indent=2), encoding="utf-8")


def _groups_to_json(groups: list[IndexGroup]) -> list[dict[str, Any]]:
    return [
        {
            "initial": g.initial,
            "entries": [
                {
                    "id": e.id,
                    "name": e.name,
                    "kind": e.kind,
                    "permalink": e.permalink,
                    "text": e.describe(),
                }
                for e in g.entries
            ],
        }
        for g in groups
    ]
