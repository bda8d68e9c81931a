import math

from python_complex import Complex, Q_
from python_complex import calc

U_1 = calc.phasor(Q_(230, 'V'), 0.0)
U_2 = calc.phasor(Q_(200, 'V'), Q_(-120, 'deg'))

# sweep from U_1 to U_2 in five steps
for k in range(5):
    p = k / 4
    U = Complex.interpolate(U_1, U_2, p)
    magnitude, angle_deg = calc.polar(U)
    print(f"p = {p:.2f}: {U:.2f} -> |U| = {magnitude:.1f} V < {angle_deg:.1f} deg")

samples = Complex.from_double_array([1.0, 0.0, 0.0, 1.0, -1.0, 0.0])
rotated = [c * Complex.from_angle(math.pi / 4) for c in samples]
print(Complex.to_double_array(c.round(3) for c in rotated))

print(Complex.from_string("3,5-2j"))
