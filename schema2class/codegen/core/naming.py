"""
Naming utilities for safe code generation.

Turns raw schema identifiers (snake_case, SHOUTING_CASE, mixed acronym
runs) into member and type names for the generated classes.
"""

from typing import List


def to_field_name(raw: str) -> str:
    """
    Convert a raw column name to a lowerCamelCase field name.

    Runs of capitals are broken up first so an acronym does not end up
    as one oversized capitalized word, then separators are dropped and
    word starts are capitalized.

    Examples:
        FLD -> fld, NDB_No -> ndbNo, FLDNum_Can -> fldNumCan,
        FLee -> fLee, FLDe -> flDe, _FldName -> fldName

    Args:
        raw: Column name exactly as reported by the schema

    Returns:
        Field name (empty if the input has no letters or digits)
    """
    return _camel_case(_break_acronyms(raw))


def to_class_name(raw: str, separator: str = "_") -> str:
    """
    Convert a raw table name to an UpperCamelCase class name.

    Each piece between separators is title-cased (first character
    upper, rest lower) and the pieces are joined.

    Args:
        raw: Table name exactly as reported by the schema
        separator: Character the table name is split on

    Returns:
        Class name (empty if the input has no pieces)
    """
    if not separator:
        return _title_case(raw)

    pieces = [piece for piece in raw.split(separator) if piece]
    return "".join(_title_case(piece) for piece in pieces)


def set_first_character(value: str, upper: bool) -> str:
    """Upper- or lower-case the first character of a string."""
    if not value:
        return ""
    first = value[0].upper() if upper else value[0].lower()
    return first + value[1:]


def is_valid_identifier(name: str) -> bool:
    """Check that a derived name starts with a letter and holds only letters/digits."""
    if not name or not name[0].isalpha():
        return False
    return all(ch.isalnum() for ch in name)


def _break_acronyms(raw: str) -> str:
    """Lower-case the tail of every run of two or more capitals."""
    if not any(ch.islower() for ch in raw):
        return raw.lower()

    chars = list(raw)
    length = len(chars)
    i = 0
    while i < length:
        if not chars[i].isupper():
            i += 1
            continue

        end = i + 1
        while end < length and chars[end].isupper():
            end += 1

        if end - i >= 2:
            # A capital followed by lower case starts the next word
            stop = end - 1 if end < length and chars[end].islower() else end
            for j in range(i + 1, stop):
                chars[j] = chars[j].lower()
        i = end

    return "".join(chars)


def _split_words(value: str) -> List[str]:
    """Split on non-alphanumerics and on lower-to-upper transitions."""
    words: List[str] = []
    current: List[str] = []
    previous = ""

    for ch in value:
        if not ch.isalnum():
            if current:
                words.append("".join(current))
                current = []
            previous = ""
            continue

        if current and previous.islower() and ch.isupper():
            words.append("".join(current))
            current = []

        current.append(ch)
        previous = ch

    if current:
        words.append("".join(current))
    return words


def _camel_case(value: str) -> str:
    """Join words, lowering the first word's initial and raising the others'."""
    words = _split_words(value)
    if not words:
        return ""

    first, rest = words[0], words[1:]
    return set_first_character(first, upper=False) + "".join(
        set_first_character(word, upper=True) for word in rest
    )


def _title_case(piece: str) -> str:
    """Title-case a piece; a space restarts the capitalization."""
    result = []
    start_of_word = True
    for ch in piece:
        if ch == " ":
            start_of_word = True
            result.append(ch)
            continue
        result.append(ch.upper() if start_of_word else ch.lower())
        start_of_word = False
    return "".join(result)
