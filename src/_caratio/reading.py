import pathlib
from contextlib import contextmanager

from _caratio.reader import CaratReader


@contextmanager
def open_reader(filelike, encoding="ascii", **kwargs):
    """
    Opens a CaratReader for the duration of the with block, ie.

    >>> with open_reader("/my/file.txt") as reader:
    ...     reader.expect("ND-COOR")

    :param filelike: Either a path, in which case the file is opened and
        closed again when leaving the block, or an open text stream which
        is left open.
    :param encoding: Encoding of the file when filelike is a path. An open
        stream is already decoded, so encoding is not used for it.
    :param kwargs: Passed on to CaratReader.
    """
    if isinstance(filelike, (str, pathlib.Path)):
        reader = CaratReader.from_file(filelike, encoding=encoding, **kwargs)
    else:
        reader = CaratReader.from_stream(filelike, **kwargs)

    try:
        yield reader
    finally:
        reader.close()


def read_tokens(filelike, **kwargs):
    """
    :returns: List of all tokens in the given file or text stream.
    """
    tokens = []
    with open_reader(filelike, **kwargs) as reader:
        while not reader.eof:
            tokens.append(reader.token)
            reader.ignore()
    return tokens
