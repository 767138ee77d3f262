import hypothesis.strategies as st

from tensorbits import Float, Signed, Unsigned

widths = st.sampled_from([1, 8, 16, 32, 64])

integer_types = st.one_of(st.builds(Signed, widths), st.builds(Unsigned, widths))

float_types = st.builds(Float, widths)

element_types = st.one_of(integer_types, float_types)

shapes = st.lists(st.integers(min_value=1, max_value=4), max_size=3).map(tuple)


def nest(values: list, shape: tuple[int, ...]):
    iterator = iter(values)

    def recurse(shape: tuple[int, ...]):
        if len(shape) == 0:
            return next(iterator)
        else:
            return [recurse(shape[1:]) for _ in range(shape[0])]

    return recurse(shape)


@st.composite
def nested_lists(draw, elements: st.SearchStrategy, shapes: st.SearchStrategy = shapes):
    shape = draw(shapes)
    size = 1
    for dimension in shape:
        size *= dimension
    values = draw(st.lists(elements, min_size=size, max_size=size))
    return shape, nest(values, shape)


@st.composite
def ragged_lists(draw):
    """A rectangular list of lists with one row lengthened or shortened."""
    rows = draw(st.integers(min_value=2, max_value=5))
    columns = draw(st.integers(min_value=1, max_value=4))
    row = draw(st.integers(min_value=1, max_value=rows - 1))
    other_columns = draw(st.integers(min_value=0, max_value=5).filter(lambda n: n != columns))

    value = [[0] * columns for _ in range(rows)]
    value[row] = [0] * other_columns
    return row, columns, other_columns, value
