"""
Split a SQL dump into single statements.

The scanner is a small state machine with three states:

    NORMAL      -> IN_STRING   on ' or "  (the quote is remembered)
    NORMAL      -> IN_COMMENT  on --
    IN_STRING   -> NORMAL      on the remembered quote, unless preceded by a backslash
    IN_COMMENT  -> NORMAL      on \\n or \\r

A `;` only ends a statement in NORMAL state. A character that causes a transition
is never tested as a terminator. Doubled quotes ('it''s') are not treated as an
escape, only the backslash is.
"""
from typing import List

TERMINATOR = ';'
QUOTES = ("'", '"')
NEWLINES = ('\n', '\r')


def split_sql_statements(sql_content: str) -> List[str]:
    statements = []
    current = []
    in_string = False
    in_comment = False
    string_char = ''

    for i, char in enumerate(sql_content):
        next_char = sql_content[i + 1] if i + 1 < len(sql_content) else ''
        prev_char = sql_content[i - 1] if i > 0 else ''
        current.append(char)

        # comments
        if not in_string and char == '-' and next_char == '-':
            in_comment = True
            continue

        if in_comment and char in NEWLINES:
            in_comment = False
            continue

        if in_comment:
            continue

        # strings
        if not in_string and char in QUOTES:
            in_string, string_char = True, char
            continue

        if in_string and char == string_char and prev_char != '\\':
            in_string, string_char = False, ''
            continue

        if in_string:
            continue

        if char == TERMINATOR:
            _append_statement(statements, ''.join(current))
            current = []

    _append_statement(statements, ''.join(current))
    return statements


def _append_statement(statements, statement):
    statement = statement.strip()

    # a lonely terminator left over from ";;" is not a statement
    if statement and statement != TERMINATOR:
        statements.append(statement)
