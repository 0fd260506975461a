from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """
    A token in a carat file: a keyword, a reserved punctuation character
    or a literal, together with the physical line it was read from.
    """

    text: str
    line_number: int

    def matches(self, expression):
        """
        :returns: Whether the token equals expression, ignoring case.
        """
        return self.text.lower() == expression.lower()
