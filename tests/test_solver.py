import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from shamir_recovery.errors import InconsistentSolution, InsufficientPoints
from shamir_recovery.interpolation import METHODS
from shamir_recovery.io import load_case
from shamir_recovery.shares import ShareCase
from shamir_recovery.solver import solve_case

CASE_2_SECRET = -6290016743746469796


def _case(n: int, k: int, values: dict) -> ShareCase:
    doc = {"keys": {"n": n, "k": k}}
    doc.update({str(key): {"base": "10", "value": str(value)} for key, value in values.items()})
    return ShareCase.from_dict(doc)


@pytest.mark.parametrize("method", sorted(METHODS))
def test_first_sample_case(fixtures_dir: Path, method: str) -> None:
    result = solve_case(load_case(fixtures_dir / "testcase1.json"), method=method)
    assert result.secret == 3
    assert result.degree == 2
    assert result.points_used == 3
    assert result.total_points == 3
    assert [p.x for p in result.points] == [1, 2, 3]
    assert result.method == method


@pytest.mark.parametrize("method", sorted(METHODS))
def test_second_sample_case(fixtures_dir: Path, method: str) -> None:
    result = solve_case(load_case(fixtures_dir / "testcase2.json"), method=method, cross_check=True)
    assert result.secret == CASE_2_SECRET
    assert result.degree == 6
    assert (result.points_used, result.total_points) == (7, 10)


def test_insufficient_points() -> None:
    case = _case(10, 7, {1: 1, 2: 2, 3: 3, 4: 4, 5: 5})
    with pytest.raises(InsufficientPoints) as excinfo:
        solve_case(case)
    assert (excinfo.value.needed, excinfo.value.found) == (7, 5)


def test_unknown_method_rejected() -> None:
    with pytest.raises(ValueError):
        solve_case(_case(1, 1, {1: 5}), method="newton")


def test_cross_check_reports_disagreement(monkeypatch) -> None:
    monkeypatch.setitem(METHODS, "gaussian", lambda points: 0)
    with pytest.raises(InconsistentSolution) as excinfo:
        solve_case(_case(2, 2, {1: 4, 2: 5}), method="lagrange", cross_check=True)
    assert (excinfo.value.primary, excinfo.value.secondary) == (3, 0)


def test_progress_is_logged_not_printed(caplog, capsys) -> None:
    with caplog.at_level(logging.DEBUG, logger="shamir_recovery"):
        solve_case(_case(3, 2, {1: 4, 3: 8}))
    assert "Point 2: (3, 8)" in caplog.text
    assert capsys.readouterr().out == ""


def test_concurrent_solves_are_independent(fixtures_dir: Path) -> None:
    cases = [load_case(fixtures_dir / "testcase1.json"), load_case(fixtures_dir / "testcase2.json")] * 8
    with ThreadPoolExecutor(max_workers=4) as pool:
        secrets = list(pool.map(lambda case: solve_case(case).secret, cases))
    assert secrets == [3, CASE_2_SECRET] * 8
