"""
Benchmark: repetition and sequencing over inputs of increasing size.

Every successful step hands a fresh slice of the input to the next one, so
these numbers show how that copying grows with input length for text, bytes
and token lists.

Usage:
    uv run python benchmarks/bench_repetition.py
"""

import timeit
from pyparsel.Combinators import sep_by
from pyparsel.Lexical import char, decimal_number, digit, regex
from pyparsel.Prim import satisfy, run_parser
from pyparsel.Sequence import sequence


def bench_many_char(sizes: list[int], repeats: int = 5) -> dict[int, float]:
    """Benchmark char('a').many() on strings of increasing size."""
    parser = char("a").many()
    results = {}
    for n in sizes:
        data = "a" * n
        t = timeit.timeit(lambda: run_parser(parser, data), number=repeats)
        results[n] = t / repeats
    return results


def bench_decimal(sizes: list[int], repeats: int = 5) -> dict[int, float]:
    """Benchmark decimal_number(): a very large integer literal."""
    parser = decimal_number()
    results = {}
    for n in sizes:
        data = "1" * n
        t = timeit.timeit(lambda: run_parser(parser, data), number=repeats)
        results[n] = t / repeats
    return results


def bench_csv_line(sizes: list[int], repeats: int = 5) -> dict[int, float]:
    """Benchmark sep_by(regex('[a-z]+'), char(',')): CSV-like field parsing."""
    parser = sep_by(regex(r"[a-z]+"), char(","))
    results = {}
    for n in sizes:
        # n fields of 5 letters each
        data = ",".join("abcde" for _ in range(n))
        t = timeit.timeit(lambda: run_parser(parser, data), number=repeats)
        results[n] = t / repeats
    return results


def bench_sequence(sizes: list[int], repeats: int = 5) -> dict[int, float]:
    """Benchmark a 10-ary sequence repeated over a digit string."""
    parser = sequence(*[digit()] * 10).many()
    results = {}
    for n in sizes:
        data = "0123456789" * (n // 10)
        t = timeit.timeit(lambda: run_parser(parser, data), number=repeats)
        results[n] = t / repeats
    return results


def bench_bytes(sizes: list[int], repeats: int = 5) -> dict[int, float]:
    """Benchmark a byte buffer of 7-bit bytes."""
    parser = satisfy(lambda b: b < 0x80, "7-bit byte").many()
    results = {}
    for n in sizes:
        data = bytes(range(0x80)) * (n // 0x80)
        t = timeit.timeit(lambda: run_parser(parser, data), number=repeats)
        results[n] = t / repeats
    return results


def bench_token_list(sizes: list[int], repeats: int = 5) -> dict[int, float]:
    """Benchmark parsing a list input (generic token stream)."""
    parser = satisfy(lambda t: isinstance(t, int), "int").many()
    results = {}
    for n in sizes:
        data = list(range(n))
        t = timeit.timeit(lambda: run_parser(parser, data), number=repeats)
        results[n] = t / repeats
    return results


def format_time(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:8.1f} us"
    elif seconds < 1:
        return f"{seconds * 1e3:8.2f} ms"
    else:
        return f"{seconds:8.3f}  s"


def print_results(name: str, results: dict[int, float]) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}")
    print(f"  {'Size':>10}  {'Time':>12}  {'Ratio vs smallest':>18}")
    print(f"  {'-'*10}  {'-'*12}  {'-'*18}")

    baseline = list(results.values())[0]
    for size, elapsed in results.items():
        ratio = elapsed / baseline if baseline > 0 else 0
        print(f"  {size:>10,}  {format_time(elapsed)}  {ratio:>17.1f}x")


def main() -> None:
    sizes = [1_000, 5_000, 10_000, 50_000]
    csv_sizes = [200, 1_000, 5_000, 10_000]

    print("pyparsel Repetition Benchmark")
    print("=" * 60)

    suites = [
        ("char('a').many()", bench_many_char, sizes),
        ("decimal_number()", bench_decimal, sizes),
        ("sep_by (CSV-like)", bench_csv_line, csv_sizes),
        ("sequence of 10 digits", bench_sequence, sizes),
        ("bytes", bench_bytes, sizes),
        ("List[int] tokens", bench_token_list, sizes),
    ]

    for name, fn, sz in suites:
        results = fn(sz)
        print_results(name, results)

    print()


if __name__ == "__main__":
    main()
