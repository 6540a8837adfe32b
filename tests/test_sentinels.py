import copy
import pickle

from argcheck import UNDEFINED, is_undefined
from argcheck.sentinels import _Undefined


def test_undefined_is_singleton() -> None:
    assert _Undefined() is UNDEFINED
    assert copy.copy(UNDEFINED) is UNDEFINED
    assert copy.deepcopy({"a": UNDEFINED})["a"] is UNDEFINED
    assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


def test_undefined_is_not_none() -> None:
    assert UNDEFINED is not None
    assert not UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"
    assert is_undefined(UNDEFINED)
    assert not is_undefined(None)
