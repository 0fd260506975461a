"""
Line acquisition for carat files.

A LineSource hands out the physical lines of a text stream and counts them,
a LineNormalizer drops comments and blank lines from those, so that only
lines carrying tokens reach the tokenizer. Both are lazy: a line is only
read from the stream when the previous one has been consumed.
"""

from _caratio.errors import WrongFileModeError

COMMENT_MARKER = "!"


class LineSource:
    """
    Iterable of the physical lines of a text stream.

    line_number is the number of physical lines read so far, so while
    iterating it is the number of the line just yielded.
    """

    def __init__(self, stream):
        """
        :param stream: A text stream with carat contents.
        """
        self.stream = stream
        self.line_number = 0

    def __iter__(self):
        while True:
            line = self.stream.readline()
            if not line:
                return
            if isinstance(line, bytes):
                raise WrongFileModeError("Carat file was opened in binary mode!")
            self.line_number += 1
            yield line


def normalize_line(line, comment_marker=COMMENT_MARKER):
    """
    Strip the comment and surrounding whitespace off a physical line.

    >>> normalize_line("NODE 1 ! first node")
    'NODE 1'
    >>> normalize_line("!NODE 1")
    ''

    :returns: The normalized line, empty if nothing but a comment
        or whitespace was on the line.
    """
    comment_start = line.find(comment_marker)
    if comment_start == 0:
        return ""
    if comment_start > 0:
        line = line[:comment_start]
    return line.strip()


class LineNormalizer:
    """
    Iterable of (line_number, line) for each line of the line source
    which is not empty after normalize_line.
    """

    def __init__(self, line_source, comment_marker=COMMENT_MARKER):
        self.line_source = line_source
        self.comment_marker = comment_marker

    def __iter__(self):
        for line in self.line_source:
            line = normalize_line(line, self.comment_marker)
            if line:
                yield self.line_source.line_number, line
