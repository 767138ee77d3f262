from .bits import BitReader, BitWriter, PackedBuffer
from .flatten import ShapeMismatchError
from .operators import add
from .tensor import Tensor, tensor
from .type import ElementType, Float, InvalidTypeError, Signed, Unsigned
