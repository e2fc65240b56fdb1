import math

import pytest

from symbolic_expressions import (
    Expression, ConstantNode, UnaryOpNode, BinaryOpNode, ExprKind, ExpressionDepthError,
    make_constant as C, make_variable as V,
    make_negation, make_inverse, make_sin, make_cos, make_tan,
    make_product, make_quotient, make_sum, make_difference,
    make_exponential, make_logarithm, make_power,
    simplify, simplify_node
)


def simplified(node):
    expr = Expression(node)
    simplify(expr)
    return expr


# Case table carried over from the original pass/fail harness: (name, tree, rendering, value)
HARNESS_CASES = [
    ("constant 5", lambda: C(5), "5", 5.0),
    ("constant pi", lambda: C(math.pi), "3.14", math.pi),
    ("addition", lambda: make_sum(C(3), C(2)), "5", 5.0),
    ("subtraction", lambda: make_difference(C(7), C(3)), "4", 4.0),
    ("multiplication", lambda: make_product(C(4), C(6)), "24", 24.0),
    ("division", lambda: make_quotient(C(15), C(3)), "5", 5.0),
    ("power", lambda: make_power(C(2), C(3)), "8", 8.0),
    ("square root power", lambda: make_power(C(9), C(0.5)), "3", 3.0),
    ("exponential", lambda: make_exponential(C(math.e), C(2)), "7.39", math.exp(2.0)),
    ("natural log of power", lambda: make_logarithm(C(math.e), make_power(C(math.e), C(2))), "2", 2.0),
    ("log base 10", lambda: make_logarithm(C(10), C(100)), "2", 2.0),
    ("log base 2", lambda: make_logarithm(C(2), C(8)), "3", 3.0),
    ("sin 0", lambda: make_sin(C(0)), "0", 0.0),
    ("cos 0", lambda: make_cos(C(0)), "1", 1.0),
    ("sin pi/2", lambda: make_sin(C(math.pi / 2)), "1", 1.0),
    ("cos pi", lambda: make_cos(C(math.pi)), "-1", -1.0),
    ("tan pi/4", lambda: make_tan(C(math.pi / 4)), "1", 1.0),
    ("inverse", lambda: make_inverse(C(4)), "0.25", 0.25),
    ("inverse of inverse", lambda: make_inverse(make_inverse(C(2))), "2", 2.0),
    ("(2+3)*4", lambda: make_product(make_sum(C(2), C(3)), C(4)), "20", 20.0),
    ("2^3+3^2", lambda: make_sum(make_power(C(2), C(3)), make_power(C(3), C(2))), "17", 17.0),
    ("pythagorean identity", lambda: make_sum(make_power(make_sin(C(math.pi / 6)), C(2)),
                                              make_power(make_cos(C(math.pi / 6)), C(2))), "1", 1.0),
    ("division by 1", lambda: make_quotient(C(7), C(1)), "7", 7.0),
    ("multiplication by 0", lambda: make_product(C(5), C(0)), "0", 0.0),
    ("power to 0", lambda: make_power(C(5), C(0)), "1", 1.0),
    ("power to 1", lambda: make_power(C(7), C(1)), "7", 7.0),
    ("sin(pi/2)*cos(0) + 2^log2(8)", lambda: make_sum(
        make_product(make_sin(C(math.pi / 2)), make_cos(C(0))),
        make_power(C(2), make_logarithm(C(2), C(8)))), "9", 9.0),
    ("sin(0)^2", lambda: make_power(make_sin(C(0)), C(2)), "0", 0.0),
]


@pytest.mark.parametrize("name, builder, rendering, value", HARNESS_CASES, ids=[c[0] for c in HARNESS_CASES])
def test_constant_trees_fold_completely(name, builder, rendering, value):
    expr = simplified(builder())
    assert isinstance(expr.root, ConstantNode)
    assert expr.root.value == pytest.approx(value, abs=1e-10)
    assert str(expr) == rendering


@pytest.mark.parametrize("builder, rendering, kind", [
    (lambda: make_sum(V('x'), V('y')), "x+y", ExprKind.SUM),
    (lambda: make_sum(V('x'), C(0)), "x+0", ExprKind.SUM),
    (lambda: make_product(V('x'), C(1)), "1x", ExprKind.PRODUCT),
    (lambda: make_sin(V('x')), "sin(x)", ExprKind.SIN),
    (lambda: make_inverse(V('x')), "x⁻¹", ExprKind.INVERSE),
])
def test_variables_block_folding(builder, rendering, kind):
    expr = simplified(builder())
    assert expr.root.kind == kind
    assert str(expr) == rendering


def test_partial_folding_keeps_variable_structure():
    node = make_sum(V('x'), make_product(make_sum(C(1), C(2)), make_sin(C(0))))
    expr = simplified(node)
    assert expr.root is node
    assert str(expr) == "x+0"


def test_original_complex_expression():
    node = make_quotient(
        make_sum(V('p'), make_product(V('q'), make_sum(
            make_sin(C(6)),
            make_sum(make_sum(C(5), make_product(C(3), make_inverse(C(2)))), C(5))))),
        make_inverse(make_inverse(make_inverse(C(8))))
    )
    expr = simplified(node)

    assert str(expr) == "(p+11.2q)/0.125"
    coefficient = expr.root.left.right.right
    assert coefficient.value == pytest.approx(math.sin(6) + 11.5)
    assert expr.root.right.value == pytest.approx(0.125)


def test_negation_of_constant_is_kept():
    expr = simplified(make_negation(C(5)))
    assert isinstance(expr.root, UnaryOpNode)
    assert expr.root.kind == ExprKind.NEGATION
    assert str(expr) == "-5"


def test_double_negation_is_kept():
    expr = simplified(make_negation(make_negation(C(3))))
    assert str(expr) == "-(-3)"


def test_negation_simplifies_its_operand():
    expr = simplified(make_negation(make_sum(C(1), C(2))))
    assert isinstance(expr.root.operand, ConstantNode)
    assert str(expr) == "-3"


def test_negated_constant_inside_binary_blocks_folding():
    expr = simplified(make_sum(make_negation(C(3)), C(2)))
    assert isinstance(expr.root, BinaryOpNode)
    assert str(expr) == "(-3)+2"


@pytest.mark.parametrize("builder, rendering", [
    (lambda: make_quotient(C(1), C(0)), "inf"),
    (lambda: make_quotient(C(-1), C(0)), "-inf"),
    (lambda: make_quotient(C(0), C(0)), "nan"),
    (lambda: make_inverse(C(0)), "inf"),
    (lambda: make_logarithm(C(2), C(0)), "-inf"),
    (lambda: make_logarithm(C(2), C(-1)), "nan"),
    (lambda: make_sum(make_quotient(C(1), C(0)), C(1)), "inf"),
])
def test_numeric_degeneracy_propagates(builder, rendering):
    expr = simplified(builder())
    assert isinstance(expr.root, ConstantNode)
    assert str(expr) == rendering


def test_simplify_mutates_in_place_and_returns_none():
    expr = Expression(make_sum(C(3), C(2)))
    assert simplify(expr) is None
    assert isinstance(expr.root, ConstantNode)
    assert expr.root.value == 5.0


def test_expression_method():
    expr = Expression(make_logarithm(C(2), C(8)))
    expr.simplify()
    assert str(expr) == "3"


def test_simplify_node_returns_replacement():
    assert simplify_node(make_sum(C(3), C(2))).value == 5.0
    node = make_sum(V('x'), make_cos(C(0)))
    assert simplify_node(node) is node
    assert isinstance(node.right, ConstantNode)


def test_simplify_rejects_bare_node():
    with pytest.raises(TypeError):
        simplify(make_sum(C(3), C(2)))


IDEMPOTENCE_CASES = [case[1] for case in HARNESS_CASES] + [
    lambda: make_negation(make_negation(C(3))),
    lambda: make_sum(V('x'), make_product(make_sum(C(1), C(2)), make_sin(C(0)))),
    lambda: make_product(V('q'), make_inverse(make_inverse(make_sum(V('x'), C(1))))),
    lambda: make_logarithm(make_negation(C(2)), make_tan(make_difference(V('z'), C(1)))),
    lambda: make_quotient(make_exponential(C(2), V('x')), make_negation(make_cos(C(0)))),
]


@pytest.mark.parametrize("builder", IDEMPOTENCE_CASES)
def test_simplify_is_idempotent(builder):
    once = simplified(builder())
    twice = simplified(builder())
    simplify(twice)
    assert str(twice) == str(once)


def test_simplify_depth_guard():
    node = C(1)
    for _ in range(30):
        node = make_sin(node)
    expr = Expression(node)

    with pytest.raises(ExpressionDepthError):
        simplify(expr, max_depth=30)
    assert expr.root is node

    simplify(expr, max_depth=31)
    assert isinstance(expr.root, ConstantNode)


def test_folding_agrees_with_sympy():
    node = make_sum(make_product(make_sin(C(0.3)), make_cos(C(1.2))),
                    make_quotient(make_power(C(2), C(0.5)), make_logarithm(C(3), C(7))))
    expected = float(Expression(node.copy()).to_sympy().evalf())
    expr = simplified(node)
    assert expr.root.value == pytest.approx(expected)
