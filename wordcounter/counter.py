#!/usr/bin/env python3

"""Count words in a text and print them as tab-separated counts."""

from typing import AbstractSet, Dict, Iterable, List, Tuple
import argparse
import logging
import sys

from wordcounter.report import sort_words
from wordcounter.tokens import SEPARATORS, is_separator_run, tokenize


def count(
        lines: Iterable[str],
        separators: AbstractSet[str] = SEPARATORS
        ) -> Tuple[Dict[str, int], List[str]]:
    """Count word occurrences in lines of text.

    Returns the word count table and the list of distinct words in the order
    they first appear. Words are compared case-sensitively. Line terminators
    are not considered part of the line.
    """
    word_counts = {}
    word_order = []

    line_count = 0
    token_count = 0
    for line in lines:
        line_count += 1
        for token in tokenize(line.rstrip("\r\n"), separators):
            if is_separator_run(token, separators):
                continue
            token_count += 1
            if token in word_counts:
                word_counts[token] += 1
            else:
                word_counts[token] = 1
                word_order.append(token)

    logging.debug(
        "Counted %d words (%d distinct) on %d lines.",
        token_count, len(word_order), line_count)
    return word_counts, word_order


def main():
    logging.basicConfig(format='%(asctime)s %(message)s', level=logging.INFO)

    parser = argparse.ArgumentParser(__doc__)
    parser.add_argument(
        "input", nargs="?", type=argparse.FileType("r"),
        default=sys.stdin, help="Plain text input, default is stdin.")
    args = parser.parse_args()

    logging.info("Count words in '%s'.", args.input.name)
    word_counts, word_order = count(args.input)
    args.input.close()
    logging.info("Counted %d distinct words.", len(word_order))

    for word in sort_words(word_order):
        print(f"{word}\t{word_counts[word]}")


if __name__ == "__main__":
    main()
