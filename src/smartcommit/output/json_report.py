"""JSON reporter for scripts and editor integrations."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Sequence

from smartcommit.analysis.models import DiffAnalysis
from smartcommit.message.cleanup import extract_commit_type


def to_dict(
    analysis: DiffAnalysis,
    messages: Optional[Sequence[str]] = None,
) -> Dict[str, Any]:
    """Convert a DiffAnalysis (and optional messages) to a JSON-serialisable dict."""
    files_list: List[Dict[str, Any]] = []
    for f in analysis.files:
        files_list.append({
            "path": f.path,
            "status": f.status.value,
            "additions": f.additions,
            "deletions": f.deletions,
        })

    stats = analysis.stats
    data: Dict[str, Any] = {
        "version": "1.0",
        "files": files_list,
        "stats": {
            "total_additions": stats.total_additions,
            "total_deletions": stats.total_deletions,
            "total_files": stats.total_files,
            "net_change": stats.net_change,
            "change_ratio": round(stats.change_ratio, 2),
        },
        "categories": {
            name: [f.path for f in files]
            for name, files in analysis.categories.non_empty()
        },
        "change_patterns": list(analysis.change_patterns),
        "suggested_type": analysis.suggested_type,
        "suggested_scope": analysis.suggested_scope,
        "is_breaking_change": analysis.is_breaking_change,
        "project_context": asdict(analysis.project_context),
    }

    if messages is not None:
        data["messages"] = [
            {"message": m, "commit_type": extract_commit_type(m)} for m in messages
        ]

    return data


def render(analysis: DiffAnalysis, messages: Optional[Sequence[str]] = None) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(analysis, messages), indent=2)
