"""
Best-effort context extraction from raw OpenAPI text.

JSON documents are read structurally. Anything that does not parse as a JSON
object (YAML, truncated uploads, free text) goes through a few regexes that
recover the title, version and path list; everything else is left empty.
extract_context() never raises.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List

from .types import PathEntry, SpecContext

# quoted or bare scalar values, first occurrence wins
_TITLE_RE = re.compile(r"""\btitle:[ \t]*["']?([^"'\n]+?)["']?[ \t]*$""", re.M)
_VERSION_RE = re.compile(r"""(?<![\w-])version:[ \t]*["']?([^"'\n]+?)["']?[ \t]*$""", re.M)
# body of the `paths:` block, up to the next top-level key or end of text
_PATHS_BLOCK_RE = re.compile(r"paths:([\s\S]*?)(?=\n\w+:|\Z)", re.M)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _auth_code_scopes(schemes: Dict[str, Any]) -> List[str]:
    scopes: List[str] = []
    for scheme in schemes.values():
        flows = _as_dict(_as_dict(scheme).get("flows"))
        auth_code = _as_dict(flows.get("authorizationCode"))
        scopes.extend(_as_dict(auth_code.get("scopes")).keys())
    # dedupe, keep first occurrence
    return list(dict.fromkeys(scopes))


def _from_document(doc: Dict[str, Any]) -> SpecContext:
    info = _as_dict(doc.get("info"))
    paths = [
        PathEntry(path=str(path), operations=list(_as_dict(item).keys()))
        for path, item in _as_dict(doc.get("paths")).items()
    ]
    components = _as_dict(doc.get("components"))
    schemes = _as_dict(components.get("securitySchemes"))
    return SpecContext(
        info=info,
        title=str(info.get("title") or ""),
        version=str(info.get("version") or ""),
        paths=paths,
        security_schemes=schemes,
        schema_names=list(_as_dict(components.get("schemas")).keys()),
        scopes=_auth_code_scopes(schemes),
    )


def _from_text(text: str) -> SpecContext:
    title_m = _TITLE_RE.search(text)
    version_m = _VERSION_RE.search(text)
    title = title_m.group(1) if title_m else ""
    version = version_m.group(1) if version_m else ""

    block_m = _PATHS_BLOCK_RE.search(text)
    block = block_m.group(1) if block_m else ""
    paths = [
        PathEntry(path=line.strip().split(":")[0])
        for line in block.split("\n")
        if line.strip().startswith("/")
    ]
    return SpecContext(
        info={"title": title, "version": version},
        title=title,
        version=version,
        paths=paths,
    )


def extract_context(spec_text: str) -> SpecContext:
    """Summarize an OpenAPI spec string; degrades to a mostly-empty context."""
    try:
        doc = json.loads(spec_text)
    except (TypeError, ValueError):
        return _from_text(spec_text or "")
    if not isinstance(doc, dict):
        return _from_text(spec_text)
    return _from_document(doc)
