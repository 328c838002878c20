"""Security-header verification on HEAD responses."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence


@dataclass(slots=True)
class HeaderCheck:
    label: str
    reachable: bool
    missing: List[str] = field(default_factory=list)
    present: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.reachable and not self.missing


def evaluate_headers(
    label: str,
    headers: Optional[Mapping[str, str]],
    required: Sequence[str],
) -> HeaderCheck:
    """Compare response *headers* (lower-cased names) against *required*."""
    if headers is None:
        return HeaderCheck(label=label, reachable=False)
    check = HeaderCheck(label=label, reachable=True)
    for name in required:
        value = headers.get(name.lower())
        if value is None:
            check.missing.append(name)
        else:
            check.present[name] = value
    return check


def header_lines(check: HeaderCheck) -> List[str]:
    if not check.reachable:
        return [f"- {check.label} (HEAD failed) ❌"]
    if check.missing:
        lines = [f"- {check.label} : missing → {', '.join(check.missing)} ❌"]
    else:
        lines = [f"- {check.label} : all headers present ✅"]
    # echo received values
    lines.extend(f"  - {name}: {value}" for name, value in check.present.items() if value)
    return lines
