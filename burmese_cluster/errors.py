class UnexpectedCharacterError(ValueError):
    """
    Raised when a code point does not belong in the slot implied by the call.

    :param code_point: the rejected code point
    :param slot: description of the context, e.g. "kinzi", "stacked", "non-Burmese" or "main"
    """

    def __init__(self, code_point, slot):
        self.code_point = code_point
        self.slot = slot
        super().__init__(describe(code_point, slot))


def describe(code_point, slot):
    if 0 <= code_point <= 0x10FFFF:
        char = chr(code_point)
    else:
        char = "?"
    return f"Unexpected {slot} character: {char} U+{code_point:04X}"
