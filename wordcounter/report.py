"""Render word counts as an HTML table."""

from typing import Dict, Iterable, Iterator, List, TextIO
import html


def sort_words(words: Iterable[str]) -> List[str]:
    """Sort words alphabetically ignoring case.

    The sort is stable, words that differ only in case keep their order.
    """
    return sorted(words, key=str.lower)


def render_lines(
        input_name: str,
        words: Iterable[str],
        word_counts: Dict[str, int]) -> Iterator[str]:
    name = html.escape(input_name, quote=False)
    yield "<html>"
    yield "<head>"
    yield f"<title>Words Counted in {name}</title>"
    yield "</head>"
    yield "<body>"
    yield f"<h2>Words Counted in {name}</h2>"
    yield "<hr />"
    yield '<table border="1">'
    yield "<tr>"
    yield "<th>Words</th>"
    yield "<th>Counts</th>"
    yield "</tr>"

    for word in words:
        yield "<tr>"
        yield f"<td>{html.escape(word, quote=False)}</td>"
        yield f"<td>{word_counts[word]}</td>"
        yield "</tr>"

    yield "</table>"
    yield "</body>"
    yield "</html>"


def render(
        input_name: str,
        words: Iterable[str],
        word_counts: Dict[str, int]) -> str:
    """Return the HTML document listing words sorted with their counts."""
    return "".join(
        line + "\n" for line in render_lines(
            input_name, sort_words(words), word_counts))


def write_report(
        output: TextIO,
        input_name: str,
        words: Iterable[str],
        word_counts: Dict[str, int]) -> None:
    for line in render_lines(input_name, sort_words(words), word_counts):
        print(line, file=output)
