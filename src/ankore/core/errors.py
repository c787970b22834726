# src/ankore/core/errors.py
"""
Lookup errors.

Messages are meant to be shown to the user verbatim.
"""


class AnkoreError(Exception):
    pass


class NoDictionaryData(AnkoreError):
    def __init__(self, expression: str):
        self.expression = expression
        super().__init__(f'Could not fetch dictionary data for "{expression}".')


class NoContextualSentence(AnkoreError):
    def __init__(self, expression: str):
        self.expression = expression
        super().__init__(
            f'No contextual sentence found for "{expression}". '
            "Try another word or add one manually after selecting a different word."
        )


class MalformedPayload(AnkoreError):
    """A source answered with something that is not the expected JSON shape."""

    def __init__(self, source: str, detail: str = ""):
        self.source = source
        message = f"Malformed payload from {source}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class InvalidSentence(AnkoreError):
    pass


class TranslationUnavailable(AnkoreError):
    pass
