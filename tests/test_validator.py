"""Tests for parameter and input validation."""

from simulator.simulation import ParameterValidator, InputValidator
from simulator.models import RunParameters

from tests.conftest import make_driver, make_route, make_order, make_params


class TestParameterValidator:
    def test_valid_params(self):
        assert ParameterValidator.validate(make_params()) == []

    def test_zero_drivers(self):
        issues = ParameterValidator.validate(make_params(number_of_drivers=0))
        assert len(issues) == 1
        assert "number_of_drivers" in issues[0]

    def test_non_integer_drivers(self):
        issues = ParameterValidator.validate(make_params(number_of_drivers=2.5))
        assert any("integer" in issue for issue in issues)

    def test_missing_start_time(self):
        issues = ParameterValidator.validate(make_params(route_start_time="  "))
        assert issues == ["PARAMS: route_start_time is required"]

    def test_max_hours_below_one(self):
        issues = ParameterValidator.validate(make_params(max_hours_per_driver=0.5))
        assert any("max_hours_per_driver" in issue for issue in issues)

    def test_collects_every_issue(self):
        params = RunParameters(number_of_drivers=-1, route_start_time="",
                               max_hours_per_driver="eight")
        assert len(ParameterValidator.validate(params)) == 3


class TestInputValidator:
    def test_clean_data(self):
        validator = InputValidator([make_driver()], [make_route()], [make_order()])
        assert validator.validate() == []

    def test_unknown_traffic_level_reported(self):
        validator = InputValidator([], [make_route(traffic_level="Extreme")], [])
        issues = validator.validate()
        assert len(issues) == 1
        assert issues[0].startswith("TRAFFIC")
        assert "treated as Low" in issues[0]

    def test_unresolved_route_reported(self):
        validator = InputValidator([], [make_route()], [make_order(route_id="R999")])
        assert any("ROUTE MISSING" in issue for issue in validator.validate())

    def test_duplicates_reported(self):
        validator = InputValidator(
            [], [make_route(), make_route()], [make_order(), make_order()]
        )
        issues = validator.validate()
        assert any("duplicate route_id R001" in issue for issue in issues)
        assert any("duplicate order_id O001" in issue for issue in issues)

    def test_non_positive_values(self):
        validator = InputValidator(
            [make_driver(past_hours=(-1,))],
            [make_route(distance_km=0, base_time_minutes=-5)],
            [make_order(value_rs=0)],
        )
        issues = validator.validate()
        assert any("negative hours" in issue for issue in issues)
        assert any("distance_km" in issue for issue in issues)
        assert any("base_time_minutes" in issue for issue in issues)
        assert any("value_rs" in issue for issue in issues)
