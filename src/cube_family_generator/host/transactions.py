# File: src/cube_family_generator/host/transactions.py
"""Scoped Revit transactions: commit on normal exit, roll back on any error."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from ..errors import HostOperationError
from . import revit_api

logger = logging.getLogger(__name__)


@contextmanager
def revit_transaction(doc, name: str) -> Iterator[Any]:
    """Run the enclosed block inside a named Revit transaction.

    Args:
        doc: Revit Document (project or family)
        name: Transaction name shown in the undo list

    Yields:
        The started Transaction

    Raises:
        HostUnavailableError: If the Revit API is not loaded
        HostOperationError: If the transaction does not commit
    """
    revit_api.require_revit()

    t = revit_api.DB.Transaction(doc, name)
    t.Start()
    logger.debug("Started transaction '%s'", name)

    try:
        yield t
    except Exception:
        if t.HasStarted() and not t.HasEnded():
            t.RollBack()
        logger.warning("Rolled back transaction '%s'", name)
        raise

    status = t.Commit()
    if status != revit_api.DB.TransactionStatus.Committed:
        raise HostOperationError(
            f"Transaction '{name}' did not commit (status: {status})",
            extra={"transaction": name},
        )
    logger.debug("Committed transaction '%s'", name)
