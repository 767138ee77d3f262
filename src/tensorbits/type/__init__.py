from ._exceptions import InvalidTypeError
from ._inference import infer, merge, merge_scalar, signed_size, unsigned_size, validate
from ._parser import parse_type
from ._type import ElementType, Float, Signed, Unsigned
