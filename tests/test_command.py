# File: tests/test_command.py
"""
Tests for the end-to-end cube family command.

The whole Revit object model is a MagicMock (``fake_revit``); the family
template is a real file in a temporary directory so the template check runs.
"""

import os
from unittest.mock import MagicMock

import pytest

from conftest import FakeXYZ

from cube_family_generator.command import (
    STATUS_CANCELLED,
    STATUS_FAILED,
    STATUS_SUCCEEDED,
    CommandResult,
    CubeFamilyCommand,
)
from cube_family_generator.config.settings import FamilySettings
from cube_family_generator.geometry.dimensions import CHAIN_NAMES
from cube_family_generator.host import family_loader, revit_api


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def settings(template_dir, tmp_path):
    return FamilySettings(template_dir=template_dir, output_dir=str(tmp_path / "out"))


@pytest.fixture
def host(fake_revit, monkeypatch):
    """A project document, family document and loaded family wired together."""
    monkeypatch.setattr(family_loader, "FamilyLoadOptions", MagicMock())

    plan_view = MagicMock(Name="Ref. Level", IsTemplate=False)
    family = MagicMock(Name="Cube")
    symbol = MagicMock(Name="Cube", IsActive=False)
    family.GetFamilySymbolIds.return_value = [7]

    # Plan views exist in the family doc; no Cube family in the project yet
    fake_revit.FilteredElementCollector.return_value.OfClass.side_effect = (
        lambda cls: [plan_view] if cls is fake_revit.ViewPlan else []
    )

    uiapp = MagicMock(name="uiapp")
    uidoc = uiapp.ActiveUIDocument
    doc = uidoc.Document
    doc.IsFamilyDocument = False
    doc.LoadFamily.return_value = True
    doc.GetElement.return_value = symbol
    doc.Create.NewFamilyInstance.return_value.Id.IntegerValue = 101
    uidoc.Selection.PickPoint.return_value = FakeXYZ(5.0, 5.0, 0.0)

    family_doc = uiapp.Application.NewFamilyDocument.return_value

    revit_api.clr.Reference.__getitem__.return_value.return_value.Value = family

    host = MagicMock()
    host.uiapp = uiapp
    host.uidoc = uidoc
    host.doc = doc
    host.family_doc = family_doc
    host.family = family
    host.symbol = symbol
    return host


# ============================================================================
# Success Path
# ============================================================================

class TestExecuteSuccess:
    """Full workflow against the mocked host."""

    def test_succeeds(self, host, settings):
        result = CubeFamilyCommand(settings).execute(host.uiapp)

        assert result.status == STATUS_SUCCEEDED
        assert result.succeeded
        assert result.instance_id == 101
        assert result.family_path == os.path.join(settings.output_dir, "Cube.rfa")
        assert result.dimensions == list(CHAIN_NAMES)
        assert result.message == ""

    def test_family_saved_and_closed(self, host, settings):
        CubeFamilyCommand(settings).execute(host.uiapp)

        host.uiapp.Application.NewFamilyDocument.assert_called_once_with(
            settings.template_path
        )
        host.family_doc.SaveAs.assert_called_once()
        assert host.family_doc.SaveAs.call_args.args[0] == settings.family_path
        host.family_doc.Close.assert_called_once_with(False)

    def test_instance_placed_at_picked_point(self, host, settings):
        CubeFamilyCommand(settings).execute(host.uiapp)

        host.uidoc.Selection.PickPoint.assert_called_once_with(settings.pick_prompt)
        host.symbol.Activate.assert_called_once()
        host.doc.Create.NewFamilyInstance.assert_called_once_with(
            FakeXYZ(5.0, 5.0, 0.0),
            host.symbol,
            revit_api.Structure.StructuralType.UnknownFraming,
        )

    def test_two_transactions(self, host, settings, fake_revit):
        CubeFamilyCommand(settings).execute(host.uiapp)

        names = [c.args[1] for c in fake_revit.Transaction.call_args_list]
        assert names == ["CreateGenericModel", "Insert family instance"]

    def test_result_to_dict(self, host, settings):
        data = CubeFamilyCommand(settings).execute(host.uiapp).to_dict()
        assert data["status"] == "succeeded"
        assert data["instance_id"] == 101
        assert data["error"] is None


# ============================================================================
# Failure Paths
# ============================================================================

class TestExecuteFailures:
    """Failures become CommandResult values, never exceptions."""

    def test_no_document(self, settings):
        uiapp = MagicMock()
        uiapp.ActiveUIDocument = None

        result = CubeFamilyCommand(settings).execute(uiapp)

        assert result.status == STATUS_FAILED
        assert result.message == "Please run this command in an open document."

    def test_family_document_rejected(self, settings):
        uiapp = MagicMock()
        uiapp.ActiveUIDocument.Document.IsFamilyDocument = True

        result = CubeFamilyCommand(settings).execute(uiapp)

        assert result.status == STATUS_FAILED
        uiapp.Application.NewFamilyDocument.assert_not_called()

    def test_missing_template(self, host, tmp_path):
        settings = FamilySettings(template_dir=str(tmp_path / "none"))

        result = CubeFamilyCommand(settings).execute(host.uiapp)

        assert result.status == STATUS_FAILED
        assert "template not found" in result.message
        assert result.error["type"] == "HostOperationError"
        host.uidoc.Selection.PickPoint.assert_not_called()

    def test_build_failure_closes_document(self, host, settings, fake_revit):
        host.family_doc.FamilyCreate.NewExtrusion.return_value = None

        result = CubeFamilyCommand(settings).execute(host.uiapp)

        assert result.status == STATUS_FAILED
        assert result.family_path is None
        host.family_doc.Close.assert_called_once_with(False)
        host.family_doc.SaveAs.assert_not_called()
        fake_revit.Transaction.return_value.RollBack.assert_called_once()
        host.doc.Create.NewFamilyInstance.assert_not_called()

    def test_cancelled_pick(self, host, settings):
        host.uidoc.Selection.PickPoint.side_effect = revit_api.OperationCanceledException()

        result = CubeFamilyCommand(settings).execute(host.uiapp)

        assert result.status == STATUS_CANCELLED
        assert result.family_path is not None
        host.doc.LoadFamily.assert_not_called()
        host.doc.Create.NewFamilyInstance.assert_not_called()

    def test_placement_failure_rolls_back(self, host, settings, fake_revit):
        host.doc.Create.NewFamilyInstance.return_value = None

        result = CubeFamilyCommand(settings).execute(host.uiapp)

        assert result.status == STATUS_FAILED
        assert result.instance_id is None
        fake_revit.Transaction.return_value.RollBack.assert_called_once()

    def test_unexpected_host_error(self, host, settings):
        host.uiapp.Application.NewFamilyDocument.side_effect = RuntimeError("Revit crashed")

        result = CubeFamilyCommand(settings).execute(host.uiapp)

        assert result.status == STATUS_FAILED
        assert result.message == "Unexpected error: Revit crashed"
        assert result.error["type"] == "RuntimeError"

    def test_revit_unavailable(self, no_revit, settings):
        uiapp = MagicMock()
        uiapp.ActiveUIDocument.Document.IsFamilyDocument = False

        result = CubeFamilyCommand(settings).execute(uiapp)

        assert result.status == STATUS_FAILED
        assert result.message.startswith("Revit API not available")


# ============================================================================
# Geometry Preparation
# ============================================================================

class TestPrepareGeometry:
    """Settings are converted to feet before geometry is built."""

    def test_default_geometry(self, settings):
        profile, chains = CubeFamilyCommand(settings).prepare_geometry()
        assert profile.width == 20.0
        assert chains["overall_length"].gap == 4.0

    def test_millimeter_settings(self, template_dir):
        settings = FamilySettings(template_dir=template_dir, width=609.6, gap=152.4,
                                  units="millimeters")
        profile, chains = CubeFamilyCommand(settings).prepare_geometry()
        assert profile.width == pytest.approx(2.0)
        assert chains["upper_length"].gap == pytest.approx(0.5)

    def test_default_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("CUBE_FAMILY_WIDTH", "8")
        command = CubeFamilyCommand()
        assert command.settings.width == 8.0


class TestCommandResult:
    """CommandResult bookkeeping."""

    def test_fail_records_log(self):
        result = CommandResult().fail("nope", {"type": "X"})
        assert result.status == STATUS_FAILED
        assert result.log == ["Failed: nope"]
        assert not result.succeeded
