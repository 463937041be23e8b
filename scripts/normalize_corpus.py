import sys
import os
import argparse
import logging
from collections import Counter
from tqdm import tqdm

# Add parent directory to path to import burmese_cluster package
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from burmese_cluster import BurmeseNormalizer

logger = logging.getLogger("normalize_corpus")


def process_corpus(corpus_paths, output_path, limit=None, report_path=None):
    """
    Reads corpus, normalizes every line, writes the result and counts
    which clusters were respelled.
    """
    normalizer = BurmeseNormalizer()
    rewrites = Counter()

    total_lines = 0
    # Pre-count lines for progress bar
    for path in corpus_paths:
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                total_lines += sum(1 for _ in f)

    if limit:
        total_lines = min(total_lines, limit)

    processed_lines = 0
    changed_lines = 0
    with open(output_path, "w", encoding="utf-8") as f_out, \
            tqdm(total=total_lines, desc="Normalizing Corpus") as pbar:
        for corpus_path in corpus_paths:
            if not os.path.exists(corpus_path):
                logger.warning("Corpus file not found: %s", corpus_path)
                continue

            with open(corpus_path, "r", encoding="utf-8") as f:
                for line in f:
                    if limit and processed_lines >= limit:
                        break

                    line = line.rstrip("\n")
                    segments = normalizer.segments(line)
                    normalized = "".join(canonical for _, canonical in segments)
                    if normalized != line:
                        changed_lines += 1
                        for source, canonical in segments:
                            if canonical != source:
                                rewrites[canonical] += 1

                    f_out.write(normalized + "\n")
                    processed_lines += 1
                    pbar.update(1)

            if limit and processed_lines >= limit:
                break

    print(f"Processed {processed_lines} lines, {changed_lines} changed.")

    if report_path:
        # Most frequent respellings first
        with open(report_path, "w", encoding="utf-8") as f:
            for cluster, count in rewrites.most_common():
                f.write(f"{cluster}\t{' '.join(f'U+{ord(c):04X}' for c in cluster)}\t{count}\n")
        print(f"Saved rewrite report to {report_path}")

    return processed_lines, changed_lines


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Normalize Burmese grapheme clusters in a corpus.")

    parser.add_argument("--corpus", nargs="+", required=True, help="Path(s) to corpus text file(s)")
    parser.add_argument("--output", required=True, help="Output text path")
    parser.add_argument("--report", default=None, help="Optional TSV of respelled clusters and their counts")
    parser.add_argument("--limit", type=int, default=None, help="Limit number of lines to process (for testing)")

    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)

    process_corpus(args.corpus, args.output, args.limit, args.report)
