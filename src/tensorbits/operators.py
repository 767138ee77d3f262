__all__ = ["add"]

from numbers import Real
from typing import Any

from .kernels import Operator, kernel
from .tensor import Tensor
from .type import merge_scalar, validate


def add(left: Any, right: Any) -> Any:
    """Add a scalar to a scalar or to every element of a tensor.

    Two scalars are added as ordinary Python numbers. When one side is a tensor, the result is a
    new tensor of the same shape whose type is `merge_scalar` of the tensor type and the scalar.
    The result type grows to hold the scalar, but sums that still do not fit wrap around.
    """
    match left, right:
        case Tensor(), Real():
            return add_scalar(left, right)
        case Real(), Tensor():
            return add_scalar(right, left)
        case Real(), Real():
            return left + right
        case _:
            raise TypeError(
                f"Expected a tensor and a scalar or two scalars, but got {left!r} and {right!r}"
            )


def add_scalar(tensor: Tensor, scalar: Real) -> Tensor:
    if isinstance(scalar, bool):
        scalar = int(scalar)

    output_type = validate(merge_scalar(tensor.type, scalar))

    function = kernel(tensor.type.__class__, output_type.__class__, Operator.add)
    data = function(tensor.data, tensor.type, output_type, scalar)

    return Tensor(tensor.shape, output_type, data)
