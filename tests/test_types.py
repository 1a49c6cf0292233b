from service_decommissioner.core.types import (
    Inventory,
    RemovalOutcome,
    RunResult,
    RunStatus,
    Target,
    TargetKind,
)


def test_only_missing_identifier_exits_non_zero():
    codes = {status: RunResult(status=status).exit_code for status in RunStatus}
    assert codes == {
        RunStatus.missing_identifier: 1,
        RunStatus.unresolved_location: 0,
        RunStatus.nothing_found: 0,
        RunStatus.confirmation_mismatch: 0,
        RunStatus.completed: 0,
    }


def test_failed_outcomes_do_not_change_exit_code():
    target = Target(kind=TargetKind.launcher_file, locator="a.bat", display_label="a")
    result = RunResult(
        status=RunStatus.completed,
        identifier="a",
        inventory=Inventory(identifier="a", targets=(target,)),
        outcomes=(RemovalOutcome(target=target, succeeded=False, error_detail="busy"),),
    )

    assert result.exit_code == 0
    assert not result.all_succeeded
    assert [o.error_detail for o in result.failed] == ["busy"]


def test_inventory_is_ordered_and_comparable():
    a = Target(kind=TargetKind.directory, locator="/x", display_label="x")
    b = Target(kind=TargetKind.service_entry, locator="HiveX", display_label="svc")

    inv = Inventory(identifier="x", targets=(a, b))

    assert list(inv) == [a, b]
    assert inv.kinds() == [TargetKind.directory, TargetKind.service_entry]
    assert inv == Inventory(identifier="x", targets=(a, b))
    assert inv != Inventory(identifier="x", targets=(b, a))
    assert Inventory(identifier="x").is_empty()
