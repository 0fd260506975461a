import hypothesis.strategies as st

keywords = st.text(
    alphabet=st.characters(categories=("Lu",), max_codepoint=127),
    min_size=1,
    max_size=10,
)

whitespace = st.text(alphabet=" \t", min_size=1, max_size=3)

int32s = st.integers(min_value=-(2**31), max_value=2**31 - 1)

doubles = st.floats(allow_infinity=False, allow_nan=False)

comments = st.text(
    alphabet=st.characters(exclude_categories=("C",)), max_size=20
).map(lambda text: "!" + text)

blank_lines = st.text(alphabet=" \t", max_size=4)


@st.composite
def ignored_lines(draw):
    """
    Lines which contain neither tokens nor anything but comments.
    """
    return draw(st.lists(st.one_of(comments, blank_lines), max_size=10))


@st.composite
def token_lines(draw):
    """
    A line containing keyword and integer tokens, possibly followed
    by a comment. Returns the line and the tokens on the line.
    """
    tokens = draw(
        st.lists(st.one_of(keywords, int32s.map(str)), min_size=1, max_size=6)
    )
    separators = draw(st.lists(whitespace, min_size=len(tokens), max_size=len(tokens)))
    line = "".join(sep + tok for sep, tok in zip(separators, tokens))
    if draw(st.booleans()):
        line += " " + draw(comments)
    return line, tokens
