from pprint import pformat


def value_repr(v: object, max_length: int = 80, depth: int = 3) -> str:
    text = " ".join(
        line.strip() for line in pformat(v, depth=depth, compact=True).splitlines()
    )
    if len(text) <= max_length:
        return text
    # keep both ends so quotes and brackets stay balanced
    tail = max_length // 2
    return text[: max_length - tail] + "..." + text[len(text) - tail :]
