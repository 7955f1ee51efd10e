#!/usr/bin/env python3

"""Count words in a text file and write an HTML table of the counts.

File names not given on the command line are asked for interactively.
"""

from typing import TextIO
import argparse
import logging

from wordcounter.counter import count
from wordcounter.report import sort_words, write_report


logging.basicConfig(format='%(asctime)s %(message)s', level=logging.INFO)


def ask_for_file(
        parser: argparse.ArgumentParser, prompt: str, mode: str) -> TextIO:
    name = input(prompt).strip()
    try:
        return argparse.FileType(mode)(name)
    except argparse.ArgumentTypeError as err:
        parser.error(str(err))


def main():
    parser = argparse.ArgumentParser(__doc__)
    parser.add_argument(
        "input", nargs="?", type=argparse.FileType("r"), default=None,
        help="Plain text input file.")
    parser.add_argument(
        "output", nargs="?", type=argparse.FileType("w"), default=None,
        help="Output HTML file.")
    args = parser.parse_args()

    if args.input is None:
        args.input = ask_for_file(parser, "Name of an input file: ", "r")
    if args.output is None:
        args.output = ask_for_file(parser, "Name of an output file: ", "w")

    input_name = args.input.name
    logging.info("Count words in '%s'.", input_name)
    word_counts, word_order = count(args.input)
    args.input.close()
    logging.info(
        "Counted %d words, %d distinct.",
        sum(word_counts.values()), len(word_order))

    logging.info("Write report to '%s'.", args.output.name)
    write_report(
        args.output, input_name, sort_words(word_order), word_counts)
    args.output.close()
    logging.info("Done.")


if __name__ == "__main__":
    main()
