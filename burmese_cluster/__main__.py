import argparse
import concurrent.futures
import logging
import os
import sys
import time

import psutil

from .normalization import BurmeseNormalizer


def get_memory_mb():
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


def run_concurrently(normalize_func, lines, workers):
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        # Map returns an iterator, converting to list forces execution
        list(executor.map(normalize_func, lines))


def read_lines(paths, limit):
    lines = []
    for filepath in paths:
        if limit == 0:
            break
        with open(filepath, 'r', encoding='utf-8') as f:
            for line in f:
                if limit == 0:
                    break
                line = line.strip()
                if not line:
                    continue
                lines.append(line)
                if limit > 0:
                    limit -= 1
    return lines


def benchmark(normalizer, lines, threads):
    count = len(lines)
    total_mb = sum(len(line.encode('utf-8')) for line in lines) / (1024 * 1024)
    print(f"\n--- Input Benchmark ({count} lines, {total_mb:.2f} MB) ---")
    print(f"Initial Memory: {get_memory_mb():.2f} MB")

    print("[1 Thread] Processing...", end="", flush=True)
    start_time = time.time()
    start_mem = get_memory_mb()

    for line in lines:
        normalizer.normalize(line)

    dur_seq = max(time.time() - start_time, 0.001)
    print(f" Done in {dur_seq:.3f}s")
    print(f"Throughput: {count / dur_seq:.2f} lines/sec ({total_mb / dur_seq:.2f} MB/s)")
    print(f"Mem Delta: {get_memory_mb() - start_mem:.2f} MB")

    if threads > 1:
        print(f"\n[{threads} Threads] Processing...", end="", flush=True)
        start_time = time.time()
        start_mem = get_memory_mb()

        run_concurrently(normalizer.normalize, lines, threads)

        dur_conc = max(time.time() - start_time, 0.001)
        print(f" Done in {dur_conc:.3f}s")
        print(f"Throughput: {count / dur_conc:.2f} lines/sec ({total_mb / dur_conc:.2f} MB/s)")
        print(f"Mem Delta: {get_memory_mb() - start_mem:.2f} MB")
        print(f"Speedup: {dur_seq / dur_conc:.2f}x")


def show(normalizer, line, as_clusters):
    if as_clusters:
        print(f"Original:  {line}")
        print(f"Clusters:  {' | '.join(normalizer.clusters(line))}")
    else:
        print(f"Original:   {line}")
        print(f"Normalized: {normalizer.normalize(line)}")
    print("-" * 40)


def build_parser():
    parser = argparse.ArgumentParser(description="Burmese Grapheme Cluster Normalizer CLI")
    parser.add_argument("text", nargs="*", help="Raw text to normalize")
    parser.add_argument("--input", nargs="+", help="Input file(s)")
    parser.add_argument("--limit", type=int, default=-1, help="Limit number of lines")
    parser.add_argument("--clusters", action="store_true", help="Show grapheme clusters instead of normalized text")
    parser.add_argument("--benchmark", action="store_true", help="Run benchmark mode")
    parser.add_argument("--threads", type=int, default=4, help="Number of threads for concurrent benchmark")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    normalizer = BurmeseNormalizer()

    try:
        if args.benchmark and args.input:
            print("Reading input files...")
            benchmark(normalizer, read_lines(args.input, args.limit), args.threads)
        elif args.input:
            for line in read_lines(args.input, args.limit):
                show(normalizer, line, args.clusters)
        elif args.text:
            show(normalizer, " ".join(args.text), args.clusters)
        else:
            print("Usage: python -m burmese_cluster [--clusters] (<text> | --input <file> [--benchmark])")
            return 1
    except FileNotFoundError as e:
        print(f"Error: Could not find input file {e.filename}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
