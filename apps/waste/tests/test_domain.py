"""Domain Layer 단위 테스트."""

from __future__ import annotations

import math

import pytest

from waste.domain.entities import RecyclingCenter
from waste.domain.enums import ModelState, WasteCategory
from waste.domain.exceptions import DomainError, InvalidCoordinateError
from waste.domain.services import EARTH_RADIUS_KM, distance_km, select_top
from waste.domain.value_objects import (
    DISPOSAL_TIPS,
    ClassificationResult,
    Coordinates,
    disposal_tip_for,
)


class TestWasteCategory:
    """WasteCategory 테스트."""

    def test_declaration_order_matches_model_index(self) -> None:
        """선언 순서 = 모델 출력 인덱스."""
        assert [c.value for c in WasteCategory] == [
            "Plastic Bottle",
            "Glass Jar",
            "Organic Waste",
            "Paper",
            "Aluminum Can",
            "Textile",
            "Electronic Waste",
            "General Trash",
        ]

    def test_from_index(self) -> None:
        assert WasteCategory.from_index(0) is WasteCategory.PLASTIC_BOTTLE
        assert WasteCategory.from_index(7) is WasteCategory.GENERAL_TRASH

    @pytest.mark.parametrize("index", [-1, 8, 100])
    def test_from_index_out_of_range(self, index: int) -> None:
        with pytest.raises(IndexError):
            WasteCategory.from_index(index)


class TestModelState:
    """ModelState 테스트."""

    def test_terminal_states(self) -> None:
        assert ModelState.FAILED.is_terminal
        assert ModelState.UNLOADED.is_terminal
        assert not ModelState.PENDING.is_terminal
        assert not ModelState.LOADING.is_terminal
        assert not ModelState.READY.is_terminal


class TestDisposalTips:
    """배출 안내 테스트."""

    def test_every_category_has_exactly_one_tip(self) -> None:
        assert set(DISPOSAL_TIPS) == set(WasteCategory)
        assert len(DISPOSAL_TIPS) == len(WasteCategory)

    def test_tip_text(self) -> None:
        assert disposal_tip_for(WasteCategory.GENERAL_TRASH) == "Dispose in landfill bin."
        assert (
            disposal_tip_for(WasteCategory.PLASTIC_BOTTLE)
            == "Rinse and place in plastic recycling. Check local rules for caps."
        )

    def test_tips_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            DISPOSAL_TIPS[WasteCategory.PAPER] = "changed"  # type: ignore[index]


class TestDistanceKm:
    """haversine 거리 테스트."""

    def test_identity_is_zero(self) -> None:
        assert distance_km(40.7128, -74.006, 40.7128, -74.006) == 0

    def test_symmetric(self) -> None:
        a = distance_km(40.7128, -74.006, 51.5074, -0.1278)
        b = distance_km(51.5074, -0.1278, 40.7128, -74.006)
        assert a == pytest.approx(b)

    def test_known_distance(self) -> None:
        """뉴욕 ↔ 런던 약 5570km."""
        assert distance_km(40.7128, -74.006, 51.5074, -0.1278) == pytest.approx(5570, rel=0.01)

    def test_antipodal_is_half_circumference(self) -> None:
        assert distance_km(0, 0, 0, 180) == pytest.approx(math.pi * EARTH_RADIUS_KM)

    def test_nearby_centers(self) -> None:
        """등록된 센터 간 거리는 0.1km 수준."""
        d = distance_km(40.7128, -74.006, 40.7135, -74.007)
        assert 0.10 < d < 0.12


class TestSelectTop:
    """최상위 점수 선택 테스트."""

    def test_selects_max(self) -> None:
        assert select_top([0.1, 0.7, 0.2]) == (1, 0.7)

    def test_ties_select_lowest_index(self) -> None:
        assert select_top([0.1, 0.4, 0.4, 0.1]) == (1, 0.4)
        assert select_top([0.25, 0.25, 0.25, 0.25]) == (0, 0.25)

    def test_confidence_rounded_to_four_decimals(self) -> None:
        assert select_top([0.123456, 0.0])[1] == 0.1235

    def test_no_renormalization(self) -> None:
        assert select_top([3.5, 1.0]) == (0, 3.5)

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            select_top([])


class TestCoordinates:
    """Coordinates.parse 테스트."""

    def test_parse(self) -> None:
        coords = Coordinates.parse("40.7128", "-74.0060")
        assert coords == Coordinates(latitude=40.7128, longitude=-74.006)

    def test_parse_integer_strings(self) -> None:
        assert Coordinates.parse("0", "0") == Coordinates(0.0, 0.0)

    def test_out_of_range_is_not_rejected(self) -> None:
        assert Coordinates.parse("123", "500").latitude == 123.0

    @pytest.mark.parametrize(
        ("lat", "lon"),
        [("abc", "0"), ("0", "xyz"), ("nan", "0"), ("0", "inf"), ("-Infinity", "0"), ("1e999", "0")],
    )
    def test_non_finite_raises(self, lat: str, lon: str) -> None:
        with pytest.raises(InvalidCoordinateError) as exc_info:
            Coordinates.parse(lat, lon)
        assert exc_info.value.message == "Invalid lat/lon"
        assert isinstance(exc_info.value, DomainError)


class TestEntitiesAndValueObjects:
    """Entity / Value Object 테스트."""

    def test_center_coordinates(self) -> None:
        center = RecyclingCenter(
            name="Test Center",
            address="1 Main St",
            latitude=1.5,
            longitude=2.5,
            materials=("Paper",),
        )
        assert center.coordinates() == Coordinates(1.5, 2.5)

    def test_classification_result_to_dict(self) -> None:
        result = ClassificationResult(
            category=WasteCategory.PAPER,
            confidence=0.9123,
            disposal=disposal_tip_for(WasteCategory.PAPER),
        )
        assert result.to_dict() == {
            "category": "Paper",
            "confidence": 0.9123,
            "disposal": "Place dry paper in paper recycling.",
        }
