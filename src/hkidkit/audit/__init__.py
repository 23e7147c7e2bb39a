"""Audit logging subsystem for hkidkit.

Main Components
---------------
- AuditLogger: JSONL event logger
- generate_run_id: Run identifier factory
- file_digest / value_digest: Artifact hashes and keyed input digests
"""

from hkidkit.audit.digests import file_digest, value_digest
from hkidkit.audit.helpers import generate_run_id
from hkidkit.audit.logger import AuditLogger
from hkidkit.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "file_digest",
    "generate_run_id",
    "value_digest",
]
