import pytest

from stellar.environment import Environment
from stellar.errors import ErrorKind, StellarRuntimeError
from stellar.types import NULL


def test_define_and_get():
    env = Environment()
    env.define('x', 1.0)
    assert env.get('x') == 1.0


def test_declared_without_value_is_distinct_from_null():
    env = Environment()
    env.define('a', None)
    env.define('b', NULL)
    assert env.get('a') is None
    assert env.get('b') is NULL


def test_get_unbound_name():
    with pytest.raises(StellarRuntimeError) as exc:
        Environment().get('nope')
    assert exc.value.kind is ErrorKind.UNDEFINED_VARIABLE


def test_lookup_walks_outward():
    outer = Environment()
    outer.define('x', 'outer')
    inner = outer.child().child()
    assert inner.get('x') == 'outer'
    assert inner.contains('x')
    assert not inner.contains('y')


def test_shadowing_does_not_touch_outer_binding():
    outer = Environment()
    outer.define('x', 1.0)
    inner = outer.child()
    inner.define('x', 2.0)
    inner.assign('x', 3.0)
    assert inner.get('x') == 3.0
    assert outer.get('x') == 1.0


def test_assign_writes_through_to_enclosing_frame():
    outer = Environment()
    outer.define('x', 1.0)
    inner = outer.child()
    inner.assign('x', 2.0)
    assert outer.get('x') == 2.0
    assert 'x' not in inner.values


def test_assign_never_declares():
    env = Environment().child()
    with pytest.raises(StellarRuntimeError) as exc:
        env.assign('ghost', 1.0)
    assert exc.value.kind is ErrorKind.UNDEFINED_VARIABLE
    assert not env.contains('ghost')


def test_redefine_in_same_frame_overwrites():
    outer = Environment()
    outer.define('x', 1.0)
    inner = outer.child()
    inner.define('x', 2.0)
    inner.define('x', 5.0)
    assert inner.get('x') == 5.0
    assert outer.get('x') == 1.0
