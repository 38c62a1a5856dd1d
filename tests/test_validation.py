import pytest

from dungeon_rooms.generators.database import RoomSpecification, RoomTemplateRecord
from dungeon_rooms.generators.rooms import WallDirection, WallLocation
from dungeon_rooms.validation import (
    Severity,
    ValidationError,
    get_rule,
    validate_door_locations,
    validate_template_records,
)


def record(theme, width, length, locator):
    return RoomTemplateRecord(RoomSpecification(theme, width, length), locator)


def test_clean_catalog_passes():
    result = validate_template_records([record("Crypt", 4, 4, "a"), record("Hall", 2, 3, "b")])
    assert result.passed
    assert result.report() == "Validation passed: No issues found"


def test_catalog_issues():
    result = validate_template_records([
        record("Crypt", 0, 4, "zero"),
        record(" ", 2, 2, "blank"),
        record("Hall", 2, 2, "dup"),
        record("Hall", 3, 3, "dup"),
    ])
    codes = sorted(issue.code for issue in result.issues)
    assert codes == ["CAT-001", "CAT-002", "CAT-003"]
    assert result.failed
    assert [i.location for i in result.errors] == ["zero"]
    assert len(result.warnings) == 2


def test_door_set_checks():
    n1 = WallLocation(WallDirection.NORTH, 1)
    result = validate_door_locations(4, 3, [
        n1,
        WallLocation(WallDirection.EAST, 3),
        n1,
        WallLocation(WallDirection.SOUTH, 3),
    ])
    assert [i.code for i in result.issues] == ["ROOM-001", "ROOM-002"]
    assert result.issues[0].location == "east[3]"
    assert "index below 3" in result.issues[0].remediation


def test_report_and_dict():
    result = validate_template_records([record("Crypt", 0, 0, "zero")])
    report = result.report()
    assert report.startswith("Validation FAILED: 1 issue(s)")
    assert "[FAIL] CAT-001 at=zero" in report

    data = result.to_dict()
    assert data["passed"] is False
    assert data["fail_count"] == 1
    assert data["issues"][0]["severity"] == "FAIL"


def test_validation_error_carries_result():
    result = validate_template_records([record("Crypt", 0, 4, "zero")])
    error = ValidationError(result)
    assert error.result is result
    assert "CAT-001" in str(error)


def test_rule_lookup():
    assert get_rule("ROOM-002").severity == Severity.FAIL
    assert get_rule("NOPE-001") is None


def test_door_check_uses_each_wall_length():
    # width 2 limits North/South, length 5 limits East/West
    result = validate_door_locations(2, 5, [
        WallLocation(WallDirection.EAST, 4),
        WallLocation(WallDirection.WEST, 4),
        WallLocation(WallDirection.NORTH, 2),
        WallLocation(WallDirection.SOUTH, 1),
    ])
    assert [i.location for i in result.errors] == ["north[2]"]
    assert "index below 2 on the north wall" in result.errors[0].remediation


def test_door_check_rejects_non_positive_footprint():
    with pytest.raises(ValueError):
        validate_door_locations(0, 3, [])


def test_severities_and_counts():
    assert set(Severity) == {Severity.WARN, Severity.FAIL}
    data = validate_template_records([record(" ", 2, 2, "blank")]).to_dict()
    assert data["passed"] is True
    assert data["warn_count"] == 1
    assert set(data) == {"passed", "issue_count", "fail_count", "warn_count", "issues"}
