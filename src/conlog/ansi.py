"""ANSI escape stripping for the plain-text log file."""

ESC = "\x1b"


def strip_ansi(text: str) -> str:
    """Remove terminal escape sequences from text.

    An ESC starts a sequence; everything up to and including the next ASCII
    letter is dropped. A sequence left open at the end of the input is
    dropped as well.

    Examples:
        "\\x1b[31mred\\x1b[0m" -> "red"
        "caf\\u00e9 \\x1b[1;32mok" -> "caf\\u00e9 ok"
    """
    out: list[str] = []
    in_escape = False
    for ch in text:
        if in_escape:
            if ("A" <= ch <= "Z") or ("a" <= ch <= "z"):
                in_escape = False
        elif ch == ESC:
            in_escape = True
        else:
            out.append(ch)
    return "".join(out)
