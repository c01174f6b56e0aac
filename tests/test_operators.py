import pytest

from svlib.operators import Operator

ORDERINGS = (-1, 0, 1)


@pytest.mark.parametrize(
    "op, symbol",
    [
        (Operator.EQ, ""),
        (Operator.LT, "<"),
        (Operator.LE, "<="),
        (Operator.GT, ">"),
        (Operator.GE, ">="),
    ],
)
def test_symbol(op, symbol):
    assert op.symbol == symbol


@pytest.mark.parametrize("op", list(Operator))
def test_symbol_round_trip(op):
    assert Operator(op.symbol) is op


def test_unknown_symbol_rejected():
    with pytest.raises(ValueError):
        Operator("=>")


def test_equal_accepts_only_equal():
    assert [o for o in ORDERINGS if Operator.EQ.accepts(o)] == [0]


def test_less_accepts_only_smaller():
    assert [o for o in ORDERINGS if Operator.LT.accepts(o)] == [-1]


def test_greater_accepts_only_larger():
    assert [o for o in ORDERINGS if Operator.GT.accepts(o)] == [1]


@pytest.mark.parametrize("ordering", ORDERINGS)
def test_less_or_equal_is_union(ordering):
    expected = Operator.LT.accepts(ordering) or Operator.EQ.accepts(ordering)
    assert Operator.LE.accepts(ordering) == expected


@pytest.mark.parametrize("ordering", ORDERINGS)
def test_greater_or_equal_is_union(ordering):
    expected = Operator.GT.accepts(ordering) or Operator.EQ.accepts(ordering)
    assert Operator.GE.accepts(ordering) == expected


@pytest.mark.parametrize("symbol", ["", "<", "<=", ">", ">="])
def test_only_sign_matters(symbol):
    op = Operator(symbol)
    assert op.accepts(-7) == op.accepts(-1)
    assert op.accepts(42) == op.accepts(1)


@pytest.mark.parametrize("ordering", ORDERINGS)
def test_strict_and_loose_disagree_only_on_equal(ordering):
    differs = Operator.LT.accepts(ordering) != Operator.LE.accepts(ordering)
    assert differs == (ordering == 0)