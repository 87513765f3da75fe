"""Tests for the width distribution engine."""

import logging

import pytest

from src.mid import ChildrenConstraints, ContainerConfig

from .lib import (
    DEFAULT_CANVAS_WIDTH,
    content_space,
    distribute,
    plan_widths,
    resolve_container_width,
    resolve_gap,
)


def _px(value: str) -> float:
    return float(value.removesuffix("px"))


def ratio(index: int, numerator: float, denominator: float) -> ChildrenConstraints:
    return ChildrenConstraints.model_validate(
        {
            "widthDistributionType": "ratio",
            "ratio": {"mainChildIndex": index, "value": [numerator, denominator]},
        }
    )


def manual(*widths: str) -> ChildrenConstraints:
    return ChildrenConstraints(width_distribution_type="manual", widths=widths)


class TestResolveContainerWidth:
    """Tests for container width resolution."""

    @pytest.mark.unit
    def test_fixed_px(self):
        config = ContainerConfig(width_type="fixed", width="480px")
        assert resolve_container_width(config) == 480

    @pytest.mark.unit
    def test_fixed_non_px_uses_canvas(self):
        config = ContainerConfig(width_type="fixed", width="80%")
        assert resolve_container_width(config) == DEFAULT_CANVAS_WIDTH

    @pytest.mark.unit
    def test_full_ignores_width(self):
        config = ContainerConfig(width_type="full", width="480px")
        assert resolve_container_width(config) == 600
        assert resolve_container_width(config, canvas_width=640) == 640


class TestResolveGap:
    """Tests for gap resolution."""

    @pytest.mark.unit
    def test_px(self):
        assert resolve_gap("20px") == 20

    @pytest.mark.unit
    @pytest.mark.parametrize("gap", [None, "", "1em", "5%"])
    def test_non_px(self, gap):
        assert resolve_gap(gap) == 0


class TestEquals:
    """Tests for equal distribution."""

    @pytest.mark.unit
    def test_three_children_with_gap(self):
        assert distribute(600, 20, 3) == ["186.67px"] * 3

    @pytest.mark.unit
    @pytest.mark.parametrize("count", [1, 2, 3, 4, 7])
    @pytest.mark.parametrize("gap", [0, 10, 15])
    def test_widths_and_gaps_fill_container(self, count, gap):
        widths = distribute(600, gap, count)
        total = sum(_px(w) for w in widths) + gap * (count - 1)
        assert total == pytest.approx(600, abs=0.01 * count)

    @pytest.mark.unit
    def test_single_child_ignores_gap(self):
        assert distribute(600, 50, 1) == ["600px"]

    @pytest.mark.unit
    def test_zero_children(self):
        assert distribute(600, 20, 0) == []

    @pytest.mark.unit
    def test_negative_space_propagates(self):
        assert content_space(100, 60, 3) == -20
        assert distribute(100, 60, 3) == ["-6.67px"] * 3


class TestRatio:
    """Tests for ratio distribution."""

    @pytest.mark.unit
    def test_two_thirds(self):
        assert distribute(600, 0, 2, ratio(0, 2, 3)) == ["400px", "200px"]

    @pytest.mark.unit
    def test_main_child_share_after_gap(self):
        widths = distribute(620, 10, 3, ratio(1, 1, 2))
        assert widths[1] == "300px"
        assert widths[0] == widths[2] == "150px"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "constraint,count",
        [
            (ratio(2, 1, 2), 2),
            (ratio(-1, 1, 2), 2),
            (ratio(0, 1, 0), 2),
            (ratio(0, 1, 2), 1),
            (ChildrenConstraints(width_distribution_type="ratio"), 2),
        ],
    )
    def test_invalid_falls_back_to_equals(self, constraint, count):
        assert distribute(600, 0, count, constraint) == distribute(600, 0, count)

    @pytest.mark.unit
    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mailframe"):
            distribute(600, 0, 2, ratio(5, 1, 2))
        assert "Invalid ratio" in caplog.text


class TestManual:
    """Tests for manual distribution."""

    @pytest.mark.unit
    def test_verbatim(self):
        assert distribute(600, 20, 2, manual("35%", "120px")) == ["35%", "120px"]

    @pytest.mark.unit
    def test_mismatch_falls_back_to_equals(self):
        assert distribute(600, 0, 3, manual("100px")) == ["200px"] * 3


class TestPlanWidths:
    """Tests for plan_widths."""

    @pytest.mark.unit
    def test_fixed_container(self):
        config = ContainerConfig(width_type="fixed", width="600px", gap="20px")
        plan = plan_widths(config, 3)
        assert plan.container_width == 600
        assert plan.gap == 20
        assert plan.widths == ("186.67px",) * 3
        assert plan.gap_count == 2

    @pytest.mark.unit
    def test_no_gap(self):
        plan = plan_widths(ContainerConfig(), 2)
        assert plan.gap_count == 0
