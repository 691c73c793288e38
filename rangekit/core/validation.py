from dataclasses import dataclass
from typing import Optional, Sequence

from rangekit.core.interval import Interval


@dataclass
class ValidationResult:
    is_valid: bool
    message: Optional[str] = None


class SequenceValidator:
    """Checks the ordering contract that nearest-match search relies on"""

    @staticmethod
    def validate_sorted(sequence: Sequence[Interval]) -> ValidationResult:
        for idx in range(1, len(sequence)):
            previous, current = sequence[idx - 1], sequence[idx]
            if current.start < previous.start:
                return ValidationResult(
                    is_valid=False,
                    message=f"Interval {idx} ({current}) starts before interval {idx - 1} ({previous})",
                )
            if current.start < previous.stop:
                return ValidationResult(
                    is_valid=False,
                    message=f"Interval {idx} ({current}) overlaps interval {idx - 1} ({previous})",
                )
        return ValidationResult(is_valid=True)


def is_sorted_sequence(sequence: Sequence[Interval]) -> bool:
    """Whether the sequence is ascending by start and at most touching at endpoints"""
    return SequenceValidator.validate_sorted(sequence).is_valid
