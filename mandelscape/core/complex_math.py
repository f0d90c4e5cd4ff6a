"""
Minimal complex arithmetic for the escape-time recurrence.
"""

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Complex:
    """Point in the complex plane (real + imag*i)."""
    real: float = 0.0
    imag: float = 0.0

    def __add__(self, other: 'Complex') -> 'Complex':
        return Complex(self.real + other.real, self.imag + other.imag)

    def __mul__(self, other: 'Complex') -> 'Complex':
        return Complex(self.real * other.real - self.imag * other.imag,
                       self.real * other.imag + self.imag * other.real)

    def magnitude_squared(self) -> float:
        return self.real * self.real + self.imag * self.imag

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def to_complex(self) -> complex:
        return complex(self.real, self.imag)

    @classmethod
    def coerce(cls, value: Union['Complex', complex, float]) -> 'Complex':
        """Accept a Complex, a builtin complex or a real number."""
        if isinstance(value, Complex):
            return value
        value = complex(value)
        return cls(value.real, value.imag)


ZERO = Complex(0.0, 0.0)
