from __future__ import annotations


def point_at_column(input_string: str, column: int) -> str:
    """Build a pointer line with a caret under the given column.

    Args:
        input_string (str): the line the pointer refers to. Only used to
            validate the column, the pointer may point one past its end
        column (int): 1-based column to point at

    Raises:
        ValueError: if column is not positive or points past the end of line

    Returns:
        str: the pointer line, e.g. "   ^" for column 4

    """
    if column < 1:
        raise ValueError("Column must be 1 or greater")

    if column > len(input_string) + 1:
        raise ValueError("Column is out of range")

    return " " * (column - 1) + "^"


def format_problem(expression: str, column: int, problem: str, solution: str) -> str:
    """Render a diagnostic for a problem in a cucumber expression.

    Args:
        expression (str): the expression source
        column (int): 1-based column of the problem
        problem (str): what went wrong
        solution (str): how to fix it

    Returns:
        str: the message

    """
    return (
        f"This Cucumber Expression has a problem at column {column}:\n"
        "\n"
        f"{expression}\n"
        f"{point_at_column(expression, column)}\n"
        f"{problem}\n"
        f"{solution}"
    )
