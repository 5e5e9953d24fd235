"""
Bit manipulation primitive.

A thin mutable wrapper over an integer used as a set of flags.
"""

from dataclasses import dataclass


@dataclass
class BitSet:
    """
    Integer value treated as a set of flag bits.

    Properties:
        value: Current flags (defaults to no flags set)

    IMPORTANT:
        No width is enforced here. Callers that care about the host's
        native unsigned width check it themselves (see analyzer).
    """

    value: int = 0

    def has(self, flag: int) -> bool:
        """True if any bit of `flag` is set."""
        return self.value & flag != 0

    def set(self, flag: int) -> None:
        self.value |= flag

    def clear(self, flag: int) -> None:
        self.value &= ~flag

    def toggle(self, flag: int) -> None:
        self.value ^= flag

    def as_unsigned(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value
