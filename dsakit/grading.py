"""Student mark sheets with letter grades."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

SUBJECTS = ("ENGLISH", "LANGUAGE", "MATHS", "SCIENCE", "COMPUTER")


def grade(mark: int) -> str:
    """Return the letter grade for a mark out of 100."""
    if mark >= 80:
        return "A"
    if mark >= 60:
        return "B"
    if mark >= 50:
        return "C"
    if mark >= 40:
        return "D"
    return "F"


@dataclass
class StudentReport:
    """Marks of one student in the five subjects."""

    name: str
    english: int
    language: int
    maths: int
    science: int
    computer: int

    @property
    def marks(self) -> tuple[int, int, int, int, int]:
        return (self.english, self.language, self.maths, self.science, self.computer)

    def total(self) -> int:
        return sum(self.marks)

    def average(self) -> int:
        """Return the mean mark, truncated toward zero."""
        total = self.total()
        quotient = abs(total) // len(self.marks)
        return quotient if total >= 0 else -quotient

    def overall_grade(self) -> str:
        return grade(self.average())


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Read students' marks from standard input and print their grades."""
    argparse.ArgumentParser(
        description="Read student marks from standard input and report grades."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        _prompt("enter the total number of students ")
        count = int(next(tokens))
        for number in range(1, count + 1):
            _prompt(f"\nstudent-{number}")
            _prompt("\nenter the name:")
            name = next(tokens)
            marks = []
            for subject in SUBJECTS:
                _prompt(f"\n{subject}:")
                mark = int(next(tokens))
                marks.append(mark)
                _prompt(f"GRADE: {grade(mark)}")
            report = StudentReport(name, *marks)
            _prompt(f"\nSUM:{report.total()}")
            _prompt(f"\naverage:{report.average()}")
            _prompt(f"\nOVERALLGRADE: {report.overall_grade()}")
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print()
    return 0