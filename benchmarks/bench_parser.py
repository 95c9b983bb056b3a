import time
import timeit

from cukexpr.lexer import tokenize
from cukexpr.parser import parse, parse_tokens
from sample_expressions import gen_sample_expression


def run_benchmark():
    EXPRESSIONS = 1000
    WORDS = 12

    st = time.monotonic()
    expressions = [gen_sample_expression(WORDS) for _ in range(EXPRESSIONS)]
    print(f"Time to generate {EXPRESSIONS} expressions: {time.monotonic() - st:.6f} seconds")

    all_tokens = [tokenize(e) for e in expressions]
    total_nodes = sum(len(list(parse(e).dfs())) for e in expressions)
    print(f"Total tokens: {sum(len(t) for t in all_tokens)}, total nodes: {total_nodes}")

    timer = timeit.Timer(lambda: [tokenize(e) for e in expressions])
    n, _ = timer.autorange()
    ttime = timer.repeat(number=n)
    print(f"Tokenize. {n} loops, best of 5: {min(ttime):.6f} seconds")

    pairs = list(zip(expressions, all_tokens))
    timer = timeit.Timer(lambda: [parse_tokens(e, t) for e, t in pairs])
    n, _ = timer.autorange()
    ttime = timer.repeat(number=n)
    print(f"Parse pre-tokenized. {n} loops, best of 5: {min(ttime):.6f} seconds")

    timer = timeit.Timer(lambda: [parse(e) for e in expressions])
    n, _ = timer.autorange()
    ttime = timer.repeat(number=n)
    print(f"Tokenize and parse. {n} loops, best of 5: {min(ttime):.6f} seconds")


if __name__ == "__main__":
    run_benchmark()
