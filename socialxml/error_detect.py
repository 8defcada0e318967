"""Detection and correction of mismatched tags in XML text."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path


class ErrorType(IntEnum):
    """Kinds of tag errors."""

    INCORRECT_TAG = 0
    EMPTY_FIELD = 1
    NO_ERROR = 2
    CLOSING_TAG_WITH_MISSING_OPENING_TAG = 3
    OPENING_TAG_WITH_MISSING_CLOSING_TAG = 4


@dataclass
class TagError:
    """A tag error and where it sits in the text.

    ``offset`` and ``line_number`` are -1 until :func:`locate_error` fills them.
    """

    offset: int
    line_number: int
    tag_length: int
    tag_info: str
    tag_index: int
    error: ErrorType


def tokenize_text(text: str) -> list[str]:
    """Split text into its tags, dropping everything outside them."""
    tokens: list[str] = []
    inside_tag = False
    for char in text:
        if char == "<":
            tokens.append(char)
            inside_tag = True
        elif char == ">":
            if tokens:
                tokens[-1] += char
            inside_tag = False
        elif inside_tag:
            tokens[-1] += char
    return tokens


def tokenize_file(path: str | Path) -> list[str]:
    """Tokenize a file; line breaks inside a tag are dropped."""
    return tokenize_text(read_file(path).replace("\n", ""))


def read_file(path: str | Path) -> str:
    """Return the whole content of a file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _is_tag(token: str) -> bool:
    return token.startswith("<") and token.endswith(">") and len(token) > 1


def is_well_formed(tokens: list[str]) -> bool:
    """Tell whether every opening tag is closed in the right order."""
    stack: list[str] = []
    for token in tokens:
        if not _is_tag(token):
            continue
        if token[1] == "/":
            if not stack or stack.pop() != token[2:-1]:
                return False
        else:
            stack.append(token[1:-1])
    return not stack


def detect_errors(tokens: list[str]) -> list[TagError]:
    """List the tag errors found in a sequence of tokens."""
    errors: list[TagError] = []
    stack: list[tuple[int, str]] = []
    closing_tag = ""

    for index, token in enumerate(tokens):
        if not _is_tag(token):
            continue
        if token[1] == "/":
            if not stack:
                errors.append(
                    TagError(-1, -1, len(token), token[2:-1], index,
                             ErrorType.CLOSING_TAG_WITH_MISSING_OPENING_TAG)
                )
            else:
                opening_index, opening_tag = stack.pop()
                closing_tag = token[2:-1]
                if opening_tag != closing_tag:
                    errors.append(
                        TagError(-1, -1, len(opening_tag) + 2, opening_tag, opening_index,
                                 ErrorType.OPENING_TAG_WITH_MISSING_CLOSING_TAG)
                    )
        else:
            stack.append((index, token[1:-1]))

    while stack:
        opening_index, opening_tag = stack.pop()
        if opening_tag != closing_tag:
            errors.append(
                TagError(-1, -1, len(opening_tag) + 2, opening_tag, opening_index,
                         ErrorType.OPENING_TAG_WITH_MISSING_CLOSING_TAG)
            )
    return errors


def locate_error(error: TagError, text: str) -> TagError:
    """Fill in the line and column of the error's tag within text and return it."""
    tag_count = 0
    error.line_number = 0
    error.offset = 0
    for char in text:
        error.offset += 1
        if char == "\r":
            continue
        if char == "\n":
            error.line_number += 1
            error.offset = 0
        if char == "<":
            if tag_count == error.tag_index:
                break
            tag_count += 1
    return error


def correct_error(current: TagError, text: str, errors: list[TagError]) -> str:
    """Fix one located error in text and shift the offsets of the others on its line."""
    corrected: list[str] = []
    offset = 1
    line = 0
    inserted_opening = False
    inserted_closing = False
    length = len(text)
    i = 0
    while i < length:
        if text[i] == "\n":
            line += 1
        if line == current.line_number:
            if offset == current.offset + 1:
                if current.error is ErrorType.CLOSING_TAG_WITH_MISSING_OPENING_TAG:
                    corrected.append(f"<{current.tag_info}>")
                    inserted_opening = True
                if current.error is ErrorType.OPENING_TAG_WITH_MISSING_CLOSING_TAG:
                    end = min(i + current.tag_length + 1, length)
                    corrected.append(text[i:end])
                    i = end
                    corrected.append(f"</{current.tag_info}>")
                    inserted_closing = True
            offset += 1
        if i < length:
            corrected.append(text[i])
        i += 1

    shift = 0
    if inserted_opening:
        shift += current.tag_length - 1
    if inserted_closing:
        shift += current.tag_length + 1
    if shift:
        for error in errors:
            if current.offset < error.offset and current.line_number == error.line_number:
                error.offset += shift
    return "".join(corrected)


def main(argv: list[str] | None = None) -> int:
    """Report and correct the tag errors of a file (default ``file.txt``)."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "file.txt"

    tokens = tokenize_file(path)
    for token in tokens:
        print(token)
    text = read_file(path)
    if is_well_formed(tokens):
        print("No tag errors found.")
    else:
        print("There is an error in the tags.")

    errors = detect_errors(tokens)
    for error in errors:
        locate_error(error, text)
        print(
            f"Error type: {int(error.error)}, Line: {error.line_number}, "
            f"Offset: {error.offset}, Tag Length: {error.tag_length}, "
            f"Tag Info: {error.tag_info}, Tag Index: {error.tag_index}"
        )

    corrected = text
    for error in errors:
        corrected = correct_error(error, corrected, errors)
    print(corrected)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())