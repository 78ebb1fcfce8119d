# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Complex value type with cached polar form.

Usable as a Tensor element type:
    >>> t = Tensor([2], [Complex(3, 4), Complex(0, 1)])
    >>> t.element_wise_apply(Complex.get_modulus).get_elements()
    (5.0, 1.0)
"""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Complex:
    """Complex number storing real/imaginary parts plus modulus and phase."""

    real: float = 0.0
    imag: float = 0.0
    modulus: float = field(init=False, compare=False)
    phase: float = field(init=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "modulus", math.sqrt(self.real * self.real + self.imag * self.imag))
        object.__setattr__(self, "phase", math.atan2(self.imag, self.real))

    @classmethod
    def from_complex(cls, value: complex) -> "Complex":
        return cls(value.real, value.imag)

    @classmethod
    def from_polar(cls, modulus: float, phase: float) -> "Complex":
        return cls(modulus * math.cos(phase), modulus * math.sin(phase))

    def get_real(self) -> float:
        return self.real

    def get_imag(self) -> float:
        return self.imag

    def get_modulus(self) -> float:
        return self.modulus

    def get_phase(self) -> float:
        return self.phase

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        sign = "-" if self.imag < 0 else "+"
        return f"{self.real}{sign}{abs(self.imag)}i"
