"""Restores words that must survive machine translation unchanged."""

import re
from typing import Iterable

NUMBER_PATTERN = re.compile(r"\d+")


class PostProcessTranslator:
    """Uses a translator's word alignment to put protected source words back.

    Protected words are numbers and the first capture group of any
    no-translate pattern that matches the source text. Alignment strings
    look like "0:4-0:5 6:9-7:11": source char span, dash, target char span.
    """

    def __init__(self, no_translate_patterns: Iterable[str] = ()):
        self.no_translate_patterns = list(no_translate_patterns)

    def fix_translation(
        self, source_message: str, alignment: str, target_message: str
    ) -> str:
        numbers = NUMBER_PATTERN.findall(source_message)
        if not numbers and not self.no_translate_patterns:
            return target_message

        align_map = self._parse_alignment(alignment)
        processed = target_message

        for pattern in self.no_translate_patterns:
            match = re.search(pattern, source_message, re.IGNORECASE)
            if match is None or match.lastindex is None or match.group(1) is None:
                continue
            for word in match.group(1).split(" "):
                processed = self._keep_source_word(align_map, source_message, processed, word)

        for number in numbers:
            processed = self._keep_source_word(align_map, source_message, processed, number)

        return processed

    @staticmethod
    def _parse_alignment(alignment: str) -> dict[str, tuple[int, int]]:
        """Map "srcStart:srcEnd" to (target start, target length)."""
        align_map: dict[str, tuple[int, int]] = {}
        for entry in alignment.split():
            source_span, target_span = entry.split("-")
            target_start, target_end = (int(i) for i in target_span.split(":"))
            align_map[source_span] = (target_start, target_end - target_start + 1)
        return align_map

    @staticmethod
    def _keep_source_word(
        align_map: dict[str, tuple[int, int]],
        source: str,
        target: str,
        source_word: str,
    ) -> str:
        if not source_word:
            return target
        start = source.find(source_word)
        if start < 0:
            return target
        span = f"{start}:{start + len(source_word) - 1}"
        if span not in align_map:
            return target

        target_start, target_length = align_map[span]
        target_word = target[target_start:target_start + target_length]
        if len(target_word.strip()) == target_length and target_word != source_word:
            return target.replace(target_word, source_word, 1)
        return target
