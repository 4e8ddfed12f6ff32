class ParseError(ValueError):
    """Raised when a command-line argument cannot be turned into geometry."""


class PointsFormatError(ParseError):
    def __init__(self, text: str):
        super().__init__(f'Invalid points format: {text}. Use "(x,y)" or "[(x,y) (x,y)]".')
        self.text = text


class CenterFormatError(ParseError):
    def __init__(self, text: str):
        super().__init__(f'Invalid center format: {text}. Use "(cx,cy)" or pass separate cx cy.')
        self.text = text
