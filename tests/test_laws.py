from hypothesis import given, strategies as st

from conftest import assert_result_eq
from pyparsel.Lexical import char, digit, string
from pyparsel.Prim import fail, pure
from pyparsel.Result import Failure, Success

# Strategy to generate arbitrary values
vals = st.integers() | st.text()
texts = st.text(alphabet="ab1", max_size=10)

# Small parsers over the alphabet above, some consuming more than one element
atoms = st.sampled_from([
    char('a'),
    char('b'),
    digit(),
    string("ab"),
    char('a').at_least_once(),
    char('b').optional(),
    fail("never"),
])

# 1. Map identity: p.map(id) === p
@given(atoms, texts)
def test_map_identity(p, text):
    assert_result_eq(p.map(lambda x: x).parse(text), p.parse(text))

# 2. Map composition: p.map(f).map(g) === p.map(g . f)
@given(atoms, texts)
def test_map_composition(p, text):
    f = lambda x: [x]
    g = lambda x: (x, len(x))
    assert_result_eq(p.map(f).map(g).parse(text), p.map(lambda x: g(f(x))).parse(text))

# 3. Choice left-bias: if p1 succeeds, p1 | p2 gives exactly p1's result
@given(atoms, atoms, texts)
def test_choice_left_bias(p1, p2, text):
    res1 = p1.parse(text)
    if isinstance(res1, Success):
        assert_result_eq((p1 | p2).parse(text), res1)
    else:
        assert_result_eq((p1 | p2).parse(text), p2.parse(text))

# 4. Sequence associativity up to nesting
@given(atoms, atoms, atoms, texts)
def test_sequence_associativity(a, b, c, text):
    left = ((a & b) & c).map(lambda r: (r[0][0], r[0][1], r[1]))
    right = (a & (b & c)).map(lambda r: (r[0], r[1][0], r[1][1]))
    res_l = left.parse(text)
    res_r = right.parse(text)
    assert type(res_l) is type(res_r)
    if isinstance(res_l, Success):
        assert_result_eq(res_l, res_r)

# 5. Non-consumption on failure: a failure never carries a remainder
@given(atoms, atoms, texts)
def test_failure_has_no_remainder(p, q, text):
    for combined in (p & q, p > q, p < q, p | q, p.exactly(2), p.filter(lambda _: None)):
        res = combined.parse(text)
        if isinstance(res, Failure):
            assert res.rest is None and res.value is None
        else:
            assert text.endswith(res.rest)

# 6. Repetition boundary: k matches, then the remainder after the k-th
@given(st.integers(min_value=0, max_value=15), st.text(alphabet="bc", max_size=5))
def test_at_least_once_boundary(k, tail):
    text = "a" * k + tail
    res = char('a').at_least_once().parse(text)
    if k == 0:
        assert isinstance(res, Failure)
    else:
        assert res == Success(['a'] * k, tail)

# 7. Left Identity: pure(a) >> f === f(a)
@given(vals)
def test_monad_left_identity(v):
    f = lambda x: pure([x])
    assert_result_eq(pure(v).bind(f).parse("xyz"), f(v).parse("xyz"))

# 8. Right Identity: m >> pure === m
@given(atoms, texts)
def test_monad_right_identity(m, text):
    assert_result_eq(m.bind(pure).parse(text), m.parse(text))

# 9. Associativity: (m >> f) >> g === m >> (\x -> f x >> g)
@given(atoms, texts)
def test_monad_associativity(m, text):
    f = lambda x: char('b').optional().map(lambda y: (x, y))
    g = lambda y: pure([y])

    lhs = m.bind(f).bind(g)
    rhs = m.bind(lambda x: f(x).bind(g))
    assert_result_eq(lhs.parse(text), rhs.parse(text))
