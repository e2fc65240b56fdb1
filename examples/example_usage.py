import math

import numpy as np
from symbolic_expressions import (
  Expression, LogLevel, configure_logging,
  make_constant, make_variable, make_sum, make_product, make_power,
  make_sin, make_cos, make_logarithm, make_quotient, make_inverse
)

def build_expression() -> Expression:
  """sin(pi/2)*cos(0) + 2^log2(8) + 3x/y⁻¹"""
  x = make_variable('x')
  y = make_variable('y')
  trig = make_product(make_sin(make_constant(math.pi / 2)), make_cos(make_constant(0)))
  power = make_power(make_constant(2), make_logarithm(make_constant(2), make_constant(8)))
  ratio = make_quotient(make_product(make_constant(3), x), make_inverse(y))
  return Expression(make_sum(make_sum(trig, power), ratio))

def main():
  configure_logging(LogLevel.DETAILED)

  expr = build_expression()
  print(f"Original:   {expr}  ({expr.measure()} bytes, {expr.size()} nodes)")

  expr.simplify()
  print(f"Simplified: {expr}  ({expr.measure()} bytes, {expr.size()} nodes)")

  xs = np.linspace(0.0, 1.0, 5)
  print("Values at y=2:", expr.evaluate({'x': xs, 'y': 2.0}))
  print("SymPy form:", expr.to_sympy())
  print("LaTeX:", expr.to_latex())

if __name__ == "__main__":
  main()
