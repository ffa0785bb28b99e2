"""
Java-specific naming rules.

Handles Java reserved words and literals that cannot be used as field names.
"""

# Java reserved words
JAVA_RESERVED_WORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "try",
    "void",
    "volatile",
    "while",
    "_",
}

# Literals that are not keywords but are still not legal identifiers
JAVA_LITERALS = {"true", "false", "null"}


def is_java_reserved(name: str) -> bool:
    """Check whether a name collides with a Java keyword or literal."""
    return name in JAVA_RESERVED_WORDS or name in JAVA_LITERALS


_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


def java_string(value: str) -> str:
    """Escape text for use inside a Java string literal."""
    escaped = []
    for ch in str(value):
        if ch in _STRING_ESCAPES:
            escaped.append(_STRING_ESCAPES[ch])
        elif ord(ch) < 0x20:
            # Octal escape; \u escapes are decoded before lexing
            escaped.append(f"\\{ord(ch):03o}")
        else:
            escaped.append(ch)
    return "".join(escaped)


def java_comment(value: str) -> str:
    """Make text safe inside a /* */ or Javadoc comment."""
    text = "".join(ch if ch.isprintable() else " " for ch in str(value))
    return text.replace("*/", "*&#47;").replace("\\u", "\\\\u")
