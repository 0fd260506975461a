class CaratSyntaxError(Exception):
    """
    Base class of all errors raised while reading a carat file. Every error
    knows the physical line the reader stood on when it was raised.
    """

    def __init__(self, message, line_number):
        super().__init__(message, line_number)
        self.message = message
        self.line_number = line_number

    def __str__(self):
        return f"{self.message} (line {self.line_number})"


def describe_token(token):
    if token is None:
        return "end of file"
    return f"'{token}'"


class ExpectedButFoundError(CaratSyntaxError):
    """
    Raised when a specific token, one of several tokens, or a value of
    a given kind was required but something else was found.
    """

    def __init__(self, expected, found, line_number, quote=True):
        """
        :param expected: Tuple of the acceptable token texts (or value
            kind labels when quote=False).
        :param found: The offending token, None at end of file.
        """
        self.expected = tuple(expected)
        self.found = found
        if quote:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
        else:
            expected_str = ", ".join(self.expected)
        super().__init__(
            f"{expected_str} expected but found {describe_token(found)}",
            line_number,
        )


class UnexpectedTokenError(CaratSyntaxError):
    """
    Raised when no grammar rule recognizes the current token.
    """

    def __init__(self, token, line_number):
        self.token = token
        super().__init__(f"Unexpected {describe_token(token)}", line_number)


class DuplicateTokenError(CaratSyntaxError):
    """
    Raised when a field was already given earlier in the same record.
    """

    def __init__(self, token, line_number):
        self.token = token
        super().__init__(f"Duplicate {describe_token(token)}", line_number)


class RequiredFieldMissingError(CaratSyntaxError):
    """
    Raised at the end of a record when a required field was never given.
    """

    def __init__(self, name, line_number):
        self.name = name
        super().__init__(f'"{name}" not specified', line_number)


class WrongFileModeError(Exception):
    """
    Thrown when a carat file is given as a binary stream, carat
    files are read as text.
    """

    pass
