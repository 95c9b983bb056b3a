_WORDS = ("three", "blind", "mice", "rats", "cuke", "have", "I", "hungry")
_PARAMETERS = ("int", "float", "word", "string", "")

COUNTER: int = 0


def gen_sample_expression(words: int) -> str:
    global COUNTER
    parts = []
    for i in range(words):
        COUNTER += 1
        word = _WORDS[COUNTER % len(_WORDS)]
        match i % 5:
            case 0:
                parts.append(word)
            case 1:
                parts.append(f"{word}(s)")
            case 2:
                parts.append(f"{{{_PARAMETERS[COUNTER % len(_PARAMETERS)]}}}")
            case 3:
                parts.append(f"{word}/{_WORDS[(COUNTER + 1) % len(_WORDS)]}")
            case _:
                parts.append(f"\\({word}\\)")

    return " ".join(parts)
