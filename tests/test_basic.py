"""
Basic tests for tinytensor (no external dependencies besides pytest).
"""

import copy
import pickle
import sys
from pathlib import Path

import pytest

# Add parent directory to path to import tinytensor
sys.path.insert(0, str(Path(__file__).parent.parent))

import tinytensor
from tinytensor import (
    ComparatorRegistry,
    Comparator,
    ShapeError,
    Tensor,
    TensorError,
    compute_strides,
    tensor,
    tensor1d,
    tensor2d,
    tensor3d,
    zeros,
)


@pytest.fixture(autouse=True)
def restore_printoptions():
    """Reset display options after every test."""
    saved = tinytensor.get_printoptions()
    yield
    tinytensor.set_printoptions(indent=saved.indent, formatter=saved.formatter)


# ---------------------------------------------------------------------------
# Construction and strides
# ---------------------------------------------------------------------------

def test_new_matrix():
    """Test construction of a 2x3 matrix from flat data."""
    t = Tensor([1, 2, 3, 4, 5, 6], [2, 3])
    assert t.shape == (2, 3)
    assert t.strides == (3, 1)
    assert t.data == (1, 2, 3, 4, 5, 6)
    assert t.ndim == 2
    assert t.size == 6


def test_new_alias():
    assert Tensor.new([1, 2], [2]) == Tensor([1, 2], [2])


def test_new_scalar():
    """An empty shape is a scalar holding exactly one element."""
    t = Tensor([5], [])
    assert t.shape == ()
    assert t.strides == ()
    assert t.data == (5,)


def test_new_zero_size_dimension():
    t = Tensor([], [3, 0, 2])
    assert t.strides == (0, 2, 1)
    assert t.size == 0


def test_new_shape_mismatch():
    """Test that mismatched data length raises ShapeError naming both counts."""
    with pytest.raises(ShapeError) as excinfo:
        Tensor([1, 2, 3], [2, 3])

    message = str(excinfo.value)
    assert message.startswith("ShapeError: ")
    assert "data length 3" in message
    assert "expected 6" in message
    assert isinstance(excinfo.value, TensorError)


def test_new_scalar_mismatch():
    with pytest.raises(ShapeError):
        Tensor([], [])
    with pytest.raises(ShapeError):
        Tensor([1, 2], [])


def test_new_zero_size_requires_empty_data():
    with pytest.raises(ShapeError):
        Tensor([1], [2, 0])


def test_new_rejects_bad_dimensions():
    """Negative and non-integer dimensions are programmer errors, not ShapeErrors."""
    with pytest.raises(ValueError):
        Tensor([], [-1])
    with pytest.raises(TypeError):
        Tensor([1, 2], [2.0])
    with pytest.raises(TypeError):
        Tensor([1], [True])


def test_new_accepts_iterables():
    t = Tensor(iter(range(6)), (d for d in (3, 2)))
    assert t.data == (0, 1, 2, 3, 4, 5)
    assert t.shape == (3, 2)


@pytest.mark.parametrize("shape", [(4,), (2, 3), (2, 3, 4), (5, 1, 2, 3), (1, 1, 1, 1, 1)])
def test_strides_follow_row_major_recurrence(shape):
    """Last stride is 1 and each stride is the next stride times the next dim."""
    size = 1
    for dim in shape:
        size *= dim
    t = Tensor(range(size), shape)

    assert len(t.strides) == len(t.shape)
    assert t.strides[-1] == 1
    for i in range(len(shape) - 1):
        assert t.strides[i] == t.strides[i + 1] * shape[i + 1]


def test_compute_strides():
    assert compute_strides((2, 3, 4)) == (12, 4, 1)
    assert compute_strides([7]) == (1,)
    assert compute_strides(()) == ()
    assert compute_strides((2, 0, 3)) == (0, 3, 1)


def test_error_equality():
    assert ShapeError("x") == ShapeError("x")
    assert ShapeError("x") != ShapeError("y")


def test_shape_error_message_has_single_prefix():
    error = ShapeError("data length 3 does not match shape (2, 3) (expected 6 elements)")
    assert str(error) == "ShapeError: data length 3 does not match shape (2, 3) (expected 6 elements)"
    assert error.message.startswith("data length")


# ---------------------------------------------------------------------------
# Value semantics
# ---------------------------------------------------------------------------

def test_immutable():
    t = Tensor([1, 2], [2])
    with pytest.raises(AttributeError):
        t.shape = (1, 2)
    with pytest.raises(AttributeError):
        t._data = (3, 4)
    with pytest.raises(AttributeError):
        del t._strides


def test_equality():
    a = Tensor([1, 2, 3, 4], [2, 2])
    assert a == Tensor([1, 2, 3, 4], [2, 2])
    assert a != Tensor([1, 2, 3, 4], [4])
    assert a != Tensor([1, 2, 3, 5], [2, 2])
    assert a != [1, 2, 3, 4]
    assert hash(a) == hash(Tensor((1, 2, 3, 4), (2, 2)))


def test_copy():
    a = Tensor([[1], [2]], [2])
    shallow = copy.copy(a)
    deep = copy.deepcopy(a)

    assert shallow == a and shallow is not a
    assert deep == a
    assert deep.data[0] is not a.data[0]
    assert a.copy() == a


def test_pickle_round_trip():
    """Tensors survive pickling and are rebuilt through the constructor."""
    a = Tensor([1, 2, 3, 4, 5, 6], [2, 3])
    for protocol in range(pickle.HIGHEST_PROTOCOL + 1):
        restored = pickle.loads(pickle.dumps(a, protocol=protocol))
        assert restored == a
        assert restored.strides == (3, 1)
    assert pickle.loads(pickle.dumps(Tensor([7], []))) == Tensor([7], [])


def test_tolist():
    assert Tensor(range(6), [2, 3]).tolist() == [[0, 1, 2], [3, 4, 5]]
    assert Tensor([9], []).tolist() == 9
    assert Tensor(range(8), [2, 2, 2]).tolist() == [[[0, 1], [2, 3]], [[4, 5], [6, 7]]]


def test_repr():
    assert repr(Tensor([1, 2], [2])) == "Tensor(data=[1, 2], shape=[2], strides=[1])"


# ---------------------------------------------------------------------------
# zeros
# ---------------------------------------------------------------------------

def test_zeros():
    """Test zero-filled tensors for several element types."""
    result = zeros([2, 3], dtype=int)
    assert result.shape == (2, 3)
    assert result.data == (0, 0, 0, 0, 0, 0)

    floats = zeros([4])
    assert floats.data == (0.0, 0.0, 0.0, 0.0)
    assert all(isinstance(value, float) for value in floats.data)

    assert zeros([2], dtype=bool).data == (False, False)


def test_zeros_scalar_and_empty():
    assert zeros([], dtype=int) == Tensor([0], [])
    assert zeros([3, 0], dtype=int).data == ()


def test_zeros_overflow():
    with pytest.raises(OverflowError):
        zeros([sys.maxsize, 2])


# ---------------------------------------------------------------------------
# Literal builders
# ---------------------------------------------------------------------------

def test_tensor1d():
    t = tensor1d([1, 2, 3])
    assert t.shape == (3,)
    assert t.strides == (1,)


def test_tensor2d_matches_new():
    t = tensor2d([[1, 2], [3, 4]])
    assert t.shape == (2, 2)
    assert t.data == (1, 2, 3, 4)
    assert t == Tensor([1, 2, 3, 4], [2, 2])


def test_tensor3d_flattens_outer_to_inner():
    t = tensor3d([[[1, 2, 3], [4, 5, 6]], [[7, 8, 9], [10, 11, 12]]])
    assert t.shape == (2, 2, 3)
    assert t.data == tuple(range(1, 13))
    assert t.strides == (6, 3, 1)


def test_tensor_dispatches_on_depth():
    assert tensor([1, 2]).shape == (2,)
    assert tensor([[1, 2, 3]]).shape == (1, 3)
    assert tensor(((1,), (2,))).shape == (2, 1)
    assert tensor([[[1]], [[2]]]).shape == (2, 1, 1)


def test_ragged_rows_rejected():
    with pytest.raises(ValueError, match="same length"):
        tensor2d([[1, 2], [3]])
    with pytest.raises(ValueError, match="same length"):
        tensor([[1], [2, 3]])


def test_ragged_blocks_rejected():
    with pytest.raises(ValueError, match="equal sizes"):
        tensor3d([[[1, 2], [3, 4]], [[5, 6]]])
    with pytest.raises(ValueError, match="equal sizes"):
        tensor3d([[[1, 2], [3, 4]], [[5, 6], [7]]])
    with pytest.raises(ValueError, match="equal sizes"):
        tensor([[[1, 2]], [[3, 4, 5]]])


def test_inconsistent_literals_rejected():
    """Empty levels, mixed nesting and deep literals are never coerced."""
    with pytest.raises(ValueError):
        tensor([])
    with pytest.raises(ValueError):
        tensor([[]])
    with pytest.raises(ValueError):
        tensor(5)
    with pytest.raises(ValueError):
        tensor([1, [2]])
    with pytest.raises(ValueError):
        tensor2d([[1, 2], 3])
    with pytest.raises(ValueError):
        tensor1d([[1, 2]])
    with pytest.raises(ValueError, match="rank 3"):
        tensor([[[[1]]]])


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def test_display_empty():
    """Scalars and zero-size tensors render as an empty bracket pair."""
    assert str(Tensor([], [0])) == "[]"
    assert str(Tensor([5], [])) == "[]"
    assert str(Tensor([], [2, 0, 3])) == "[]"
    assert str(zeros([0], dtype=str)) == "[]"


def test_display_vector():
    assert str(tensor([1, 2, 3])) == "[1, 2, 3]"
    assert str(tensor(["a", "b"])) == "['a', 'b']"
    assert str(tensor([7])) == "[7]"


def test_display_matrix():
    text = str(Tensor([1, 2, 3, 4], [2, 2]))
    assert text == "[\n  [1, 2],\n  [3, 4]\n]"
    assert not text.rstrip("]").rstrip().endswith(",")


def test_display_rank3():
    text = str(tensor([[[1, 2], [3, 4]], [[5, 6], [7, 8]]]))
    assert text == (
        "[\n"
        "  [\n"
        "    [1, 2],\n"
        "    [3, 4]\n"
        "  ],\n"
        "  [\n"
        "    [5, 6],\n"
        "    [7, 8]\n"
        "  ]\n"
        "]"
    )


def test_display_is_deterministic():
    t = zeros([2, 1, 3])
    assert str(t) == str(t)
    assert str(t) == str(copy.deepcopy(t))


# ---------------------------------------------------------------------------
# Print options
# ---------------------------------------------------------------------------

def test_set_printoptions():
    tinytensor.set_printoptions(indent=4)
    assert tinytensor.get_printoptions().indent == 4
    assert str(tensor([[1], [2]])) == "[\n    [1],\n    [2]\n]"


def test_printoptions_context():
    t = tensor([[1.5, 2.0]])
    with tinytensor.printoptions(indent=0, formatter="{:.2f}".format):
        assert str(t) == "[\n[1.50, 2.00]\n]"
    assert str(t) == "[\n  [1.5, 2.0]\n]"


def test_printoptions_validation():
    with pytest.raises(TypeError):
        tinytensor.set_printoptions(width=80)
    with pytest.raises(ValueError):
        tinytensor.set_printoptions(indent=-1)
    assert tinytensor.get_printoptions().indent == 2


# ---------------------------------------------------------------------------
# compare
# ---------------------------------------------------------------------------

def test_compare_tensors():
    assert tinytensor.compare(tensor([[1, 2], [3, 4]]), Tensor([1, 2, 3, 4], [2, 2]))
    assert not tinytensor.compare(tensor([1, 2, 3, 4]), Tensor([1, 2, 3, 4], [2, 2]))
    assert not tinytensor.compare(tensor([1, 2]), [1, 2])


def test_compare_python_objects():
    assert tinytensor.compare([1, 2, 3], [1, 2, 3])
    assert not tinytensor.compare(42, 43)


def test_compare_foreign_class_named_tensor():
    """Another library's Tensor class falls back to its own equality."""
    ForeignTensor = type("Tensor", (), {
        "__module__": "otherlib",
        "__eq__": lambda self, other: isinstance(other, type(self)),
        "__hash__": object.__hash__,
    })
    obj = ForeignTensor()

    assert tinytensor.compare(obj, obj)
    assert tinytensor.compare(obj, ForeignTensor())
    assert not tinytensor.compare(obj, tensor([1, 2]))


def test_register_comparator():
    class CaseInsensitive(Comparator):
        def compare(self, a, b):
            return a.lower() == b.lower()

    registry = ComparatorRegistry()
    registry.register_comparator("builtins.str", CaseInsensitive())
    assert registry.compare("Hello", "hello")

    with pytest.warns(UserWarning):
        registry.register_comparator("default", CaseInsensitive())
    with pytest.raises(TypeError):
        registry.register_comparator("builtins.int", object())


def main():
    """Run all tests."""
    print("\n" + "=" * 60)
    print("TINYTENSOR - BASIC TESTS")
    print("=" * 60)
    return pytest.main([__file__, "-q"])


if __name__ == "__main__":
    sys.exit(main())
