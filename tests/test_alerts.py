"""Tests del generador de alertas.

Ejecutar:
    pytest tests/test_alerts.py -v
"""

from datetime import timezone

import pytest

from extraction_api.analytics.alerts import (
    Alert,
    AlertCategory,
    AlertGenerator,
    AlertRule,
    AlertSeverity,
    generate_alerts,
    low_perfect_rate,
)
from extraction_api.analytics.trends import TrendPeriod, calculate_trends
from extraction_api.simulation import simulate_extraction


# =============================================================================
# REGLAS SOBRE LECTURAS
# =============================================================================

class TestReadingRules:

    def test_nominal_reading_has_no_alerts(self):
        assert generate_alerts(simulate_extraction(92.0, 9.0, 25)) == []

    def test_temperature_out_of_range_only(self):
        alerts = generate_alerts(simulate_extraction(100.0, 9.0, 25))

        assert len(alerts) == 1
        alert = alerts[0]
        assert alert.severity is AlertSeverity.CRITICAL
        assert alert.category is AlertCategory.PARAMETER_DEVIATION
        assert alert.metadata == {"temperature": 100.0}
        assert not any(a.severity is AlertSeverity.WARNING for a in alerts)

    def test_pressure_out_of_range_only(self):
        alerts = generate_alerts(simulate_extraction(92.0, 7.5, 25))

        assert len(alerts) == 1
        assert alerts[0].severity is AlertSeverity.WARNING
        assert alerts[0].category is AlertCategory.PARAMETER_DEVIATION
        assert alerts[0].metadata == {"pressure": 7.5}

    def test_rules_fire_independently_in_registration_order(self):
        alerts = generate_alerts(simulate_extraction())

        assert [a.message for a in alerts] == [
            "Temperature outside acceptable range",
            "Pressure outside stable range",
        ]

    def test_time_alone_raises_nothing(self):
        assert generate_alerts(simulate_extraction(92.0, 9.0, 60)) == []

    def test_rate_rule_does_not_apply_to_single_reading(self):
        assert low_perfect_rate(simulate_extraction(92.0, 9.0, 25)) is None


# =============================================================================
# REGLA DE TASA SOBRE TENDENCIAS
# =============================================================================

class TestTrendRules:

    def test_zero_rate_raises_quality_warning(self):
        trends = calculate_trends([simulate_extraction(100.0, 9.0, 25)], TrendPeriod.DAILY)

        alerts = generate_alerts(trends)

        assert len(alerts) == 1
        assert alerts[0].severity is AlertSeverity.WARNING
        assert alerts[0].category is AlertCategory.EXTRACTION_QUALITY
        assert alerts[0].metadata == {"perfect_rate": 0.0}

    def test_healthy_rate_raises_nothing(self):
        trends = calculate_trends([simulate_extraction(92.0, 9.0, 25)], TrendPeriod.DAILY)

        assert generate_alerts(trends) == []


# =============================================================================
# REGISTRO
# =============================================================================

class TestRegistry:

    def test_default_rule_names(self):
        assert AlertGenerator().rule_names == [
            "Low Perfect Extraction Rate",
            "Temperature Deviation",
            "Pressure Instability",
        ]

    def test_register_custom_rule_runs_after_defaults(self):
        def always(snapshot):
            return Alert(
                severity=AlertSeverity.INFO,
                category=AlertCategory.SYSTEM_HEALTH,
                message="heartbeat",
            )

        generator = AlertGenerator()
        generator.register(AlertRule("Heartbeat", always))

        alerts = generator.generate_alerts(simulate_extraction(100.0, 9.0, 25))

        assert [a.category for a in alerts] == [
            AlertCategory.PARAMETER_DEVIATION,
            AlertCategory.SYSTEM_HEALTH,
        ]

    def test_duplicate_rule_name_rejected(self):
        generator = AlertGenerator()

        with pytest.raises(ValueError):
            generator.register(AlertRule("Temperature Deviation", lambda s: None))

    def test_unregister(self):
        generator = AlertGenerator()
        generator.unregister("Temperature Deviation")

        assert generator.generate_alerts(simulate_extraction(100.0, 9.0, 25)) == []

    def test_empty_registry(self):
        assert AlertGenerator(rules=[]).generate_alerts(simulate_extraction()) == []


# =============================================================================
# ALERT
# =============================================================================

class TestAlert:

    def test_ids_are_unique(self):
        alerts = [a for _ in range(50) for a in generate_alerts(simulate_extraction())]

        assert len({a.id for a in alerts}) == len(alerts)

    def test_timestamp_is_utc(self):
        alert = generate_alerts(simulate_extraction(100.0, 9.0, 25))[0]

        assert alert.timestamp.tzinfo == timezone.utc

    def test_dict_representation(self):
        alert = generate_alerts(simulate_extraction(100.0, 9.0, 25))[0]
        data = alert.to_dict()

        assert data["severity"] == "Critical"
        assert data["category"] == "ParameterDeviation"
        assert Alert.from_dict(data) == alert
