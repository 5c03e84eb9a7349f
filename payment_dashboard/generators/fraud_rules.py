"""Generation-time fraud heuristic.

A transaction is flagged when a high amount lands in the early-morning
window, or, independently, when a very high amount wins a biased coin
flip. The second branch is deliberately noisy; all of its randomness
comes from the injected random source so seeded runs are reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from payment_dashboard.models.enums import Status

ODD_HOUR_HIGH_AMOUNT = "odd_hour_high_amount"
HIGH_AMOUNT_RANDOM = "high_amount_random"


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1), e.g. numpy.random.Generator."""

    def random(self) -> float: ...


@dataclass(frozen=True)
class FraudResult:
    """Result of applying the fraud heuristic to one transaction.

    Attributes:
        status: Flagged or Success.
        reason: Which branch flagged the transaction, or None.
    """

    status: Status
    reason: str | None = None

    @property
    def is_flagged(self) -> bool:
        return self.status is Status.FLAGGED


@dataclass(frozen=True)
class FraudRule:
    """Thresholds of the fraud heuristic.

    Attributes:
        odd_hour_amount: Amounts strictly above this are risky at odd hours.
        odd_hour_cutoff: Hours strictly below this count as odd hours.
        high_amount: Amounts strictly above this are eligible for the coin flip.
        high_amount_probability: Chance that an eligible amount is flagged.
    """

    odd_hour_amount: int = 6000
    odd_hour_cutoff: int = 5
    high_amount: int = 7000
    high_amount_probability: float = 0.3

    def is_odd_hour_risk(self, amount: int, hour: int) -> bool:
        """Deterministic branch: high amount before the odd-hour cutoff."""
        return amount > self.odd_hour_amount and hour < self.odd_hour_cutoff

    def evaluate(self, amount: int, hour: int, rng: RandomSource) -> FraudResult:
        """Apply the heuristic to one transaction.

        The coin is drawn only when the deterministic branch did not already
        flag the transaction and the amount is eligible.

        Args:
            amount: Transaction amount.
            hour: Hour of day, 0-23.
            rng: Random source for the probabilistic branch.

        Returns:
            FraudResult with the assigned status and the flagging branch.
        """
        if self.is_odd_hour_risk(amount, hour):
            return FraudResult(Status.FLAGGED, ODD_HOUR_HIGH_AMOUNT)
        if amount > self.high_amount and rng.random() < self.high_amount_probability:
            return FraudResult(Status.FLAGGED, HIGH_AMOUNT_RANDOM)
        return FraudResult(Status.SUCCESS)
