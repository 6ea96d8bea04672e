"""Generador de alertas basado en un registro de reglas."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from .alert_rules import AlertRule, default_rules
from .models import Alert

logger = logging.getLogger(__name__)


class AlertGenerator:
    """Evalúa todas las reglas registradas contra el mismo snapshot.

    El orden de salida es el orden de registro; que una regla dispare no
    impide evaluar las siguientes.
    """

    def __init__(self, rules: Optional[Iterable[AlertRule]] = None):
        self._rules: Dict[str, AlertRule] = {}
        for rule in default_rules() if rules is None else rules:
            self.register(rule)

    @property
    def rule_names(self) -> List[str]:
        return list(self._rules)

    def register(self, rule: AlertRule) -> None:
        if rule.name in self._rules:
            raise ValueError(f"Alert rule already registered: {rule.name}")
        self._rules[rule.name] = rule

    def unregister(self, name: str) -> None:
        self._rules.pop(name, None)

    def generate_alerts(self, snapshot: Any) -> List[Alert]:
        alerts: List[Alert] = []
        for name, rule in self._rules.items():
            alert = rule.evaluate(snapshot)
            if alert is None:
                continue
            logger.info(
                "[ALERT] rule=%s severity=%s category=%s id=%s",
                name, alert.severity.value, alert.category.value, alert.id,
            )
            alerts.append(alert)
        return alerts


def generate_alerts(snapshot: Any) -> List[Alert]:
    """Evalúa las reglas por defecto."""
    return AlertGenerator().generate_alerts(snapshot)
