# tests/conftest.py
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from collections import namedtuple
from unittest.mock import MagicMock

import pytest

from cube_family_generator.host import revit_api


# =============================================================================
# Revit API stand-ins
# =============================================================================

# Value-comparable replacements for DB.XYZ and DB.Line
FakeXYZ = namedtuple("FakeXYZ", ["X", "Y", "Z"])
FakeLine = namedtuple("FakeLine", ["start", "end"])


class FakeOperationCanceledException(Exception):
    """Stands in for Autodesk.Revit.Exceptions.OperationCanceledException."""


@pytest.fixture
def fake_revit(monkeypatch):
    """Install a MagicMock Revit API into revit_api and return the DB mock.

    Transactions start, report HasStarted() and commit successfully unless a
    test reconfigures ``DB.Transaction.return_value``.
    """
    db = MagicMock(name="DB")
    db.XYZ.side_effect = lambda x, y, z: FakeXYZ(x, y, z)
    db.Line.CreateBound.side_effect = lambda a, b: FakeLine(a, b)

    transaction = db.Transaction.return_value
    transaction.HasStarted.return_value = True
    transaction.HasEnded.return_value = False
    transaction.Commit.return_value = db.TransactionStatus.Committed

    monkeypatch.setattr(revit_api, "REVIT_AVAILABLE", True)
    monkeypatch.setattr(revit_api, "REVIT_ERROR", None)
    monkeypatch.setattr(revit_api, "DB", db)
    monkeypatch.setattr(revit_api, "UI", MagicMock(name="UI"))
    monkeypatch.setattr(revit_api, "Structure", MagicMock(name="Structure"))
    monkeypatch.setattr(revit_api, "clr", MagicMock(name="clr"))
    monkeypatch.setattr(
        revit_api, "OperationCanceledException", FakeOperationCanceledException
    )
    return db


@pytest.fixture
def no_revit(monkeypatch):
    """Force the 'Revit not installed' state regardless of the interpreter."""
    monkeypatch.setattr(revit_api, "REVIT_AVAILABLE", False)
    monkeypatch.setattr(revit_api, "REVIT_ERROR", "No module named 'clr'")


@pytest.fixture
def template_dir(tmp_path):
    """Directory holding an (empty) Generic Model template."""
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "Generic Model.rft").write_bytes(b"fake template")
    return str(directory)
