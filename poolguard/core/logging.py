"""Logging configuration and admission audit logging."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Union

from .config import Settings, get_settings


def setup_logging(settings: Union[Settings, None] = None) -> None:
    """Configure application logging."""
    settings = settings or get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class AuditLogger:
    """Audit logger for admission decisions."""

    def __init__(self, settings: Union[Settings, None] = None) -> None:
        """Initialize audit logger.

        Each audit file gets its own logger, so instances pointing at different
        files never write to each other's file.

        Args:
            settings: Settings to read the audit options from (defaults to cached settings)
        """
        self.settings = settings or get_settings()
        self.handler: Union[logging.FileHandler, None] = None

        log_path = Path(self.settings.audit_log_file).resolve()
        self.logger = logging.getLogger(f"poolguard.audit.{log_path}")
        self.logger.propagate = False

        if self.settings.audit_log_enabled:
            log_path.parent.mkdir(parents=True, exist_ok=True)

            # Another instance already writes to this file
            if any(isinstance(h, logging.FileHandler) for h in self.logger.handlers):
                return

            self.handler = logging.FileHandler(log_path)
            self.handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(self.handler)
            self.logger.setLevel(logging.INFO)

    def log_decision(
        self,
        operation: str,
        resource: str,
        status: str,
        details: Union[Dict[str, Any], None] = None,
    ) -> None:
        """Log an admission decision to the audit log.

        Args:
            operation: Admission operation (CREATE, UPDATE, DELETE)
            resource: Resource being validated (e.g., cephblockpool:rook-ceph/replicapool)
            status: Decision (ACCEPTED, REJECTED)
            details: Additional decision details
        """
        if not self.settings.audit_log_enabled:
            return

        audit_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "operation": operation,
            "resource": resource,
            "status": status,
            "details": details or {},
        }

        self.logger.info(json.dumps(audit_entry))

    def close(self) -> None:
        """Detach and close the file handler added by this instance."""
        if self.handler is None:
            return
        self.logger.removeHandler(self.handler)
        self.handler.close()
        self.handler = None
