import argparse
import sys

from rich.console import Console
from rich.table import Table

from bloomkit.analysis import measure_fpp
from bloomkit.config import CONFIG, setup_logging
from bloomkit.config.settings import LOG_LEVELS
from bloomkit.exceptions import InvalidConfigurationError
from bloomkit.filter import BloomFilter

console = Console()


def _plan_table(expected_insertions: int, fpp: float) -> Table:
    m, k = BloomFilter.dimensions(expected_insertions, fpp)
    n = expected_insertions or 1
    table = Table(title="bloomkit - Filter Plan")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Expected insertions", str(expected_insertions))
    table.add_row("Target FPP", f"{fpp:g}")
    table.add_row("Bits (m)", str(m))
    table.add_row("Hash functions (k)", str(k))
    table.add_row("Memory", f"{(m + 63) // 64 * 8} bytes")
    table.add_row("Bits per element", f"{m / n:.2f}")
    return table


def _bench_table(expected_insertions: int, fpp: float, seed: int) -> Table:
    report = measure_fpp(expected_insertions, fpp, seed=seed)
    table = Table(title="bloomkit - Empirical FPP")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Expected insertions", str(report.expected_insertions))
    table.add_row("Bits (m)", str(report.bit_size))
    table.add_row("Hash functions (k)", str(report.num_hash_functions))
    table.add_row("Probes", str(report.probes))
    table.add_row("False positives", str(report.false_positives))
    table.add_row("Observed FPP", f"{report.observed_fpp:.5f}")
    table.add_row("Target FPP", f"{report.target_fpp:g}")
    table.add_row("Expected FPP (current fill)", f"{report.expected_fpp:.5f}")
    table.add_row("Approximate element count", str(report.approximate_element_count))
    return table


def main() -> None:
    parser = argparse.ArgumentParser(
        description="bloomkit - Bloom filter sizing and benchmarking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="\nExamples:\n  bloomkit plan -n 1000000 -p 0.01   Show m and k for a filter\n  bloomkit bench -n 10000 -p 0.03    Measure the false positive rate\n        ",
    )
    parser.add_argument(
        "--log-level",
        default=CONFIG.log_level,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command")
    plan_parser = subparsers.add_parser(
        "plan", help="Compute bit-array size and hash count"
    )
    bench_parser = subparsers.add_parser(
        "bench", help="Measure the observed false positive rate"
    )
    for sub in (plan_parser, bench_parser):
        sub.add_argument(
            "-n",
            "--expected-insertions",
            type=int,
            default=CONFIG.expected_insertions,
            help="Expected number of insertions",
        )
        sub.add_argument(
            "-p",
            "--fpp",
            type=float,
            default=CONFIG.fpp,
            help="Target false positive probability",
        )
    bench_parser.add_argument(
        "--seed", type=int, default=CONFIG.seed, help="Random seed for keys"
    )
    args = parser.parse_args()
    setup_logging(args.log_level)

    try:
        if args.command == "bench":
            table = _bench_table(args.expected_insertions, args.fpp, args.seed)
        elif args.command == "plan":
            table = _plan_table(args.expected_insertions, args.fpp)
        else:
            table = _plan_table(CONFIG.expected_insertions, CONFIG.fpp)
    except InvalidConfigurationError as e:
        console.print(f"[red]error:[/red] {e}")
        sys.exit(2)
    console.print(table)


if __name__ == "__main__":
    main()
