"""Audit logging for risparse.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: event envelope written per line
"""

from risparse.audit.helpers import generate_run_id
from risparse.audit.logger import AuditLogger
from risparse.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
]
