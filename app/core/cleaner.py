import re
import logging
from typing import List

logger = logging.getLogger(__name__)


class LyricsCleaner:
    """
    Utility to isolate song lyrics from a scraped lyrics page.

    Pipeline:
    1. Head Trim: drop everything before the first recognised section marker.
    2. Line Filter: drop empty, junk and over-long narration lines.
    3. Marker Formatting: put every [tag] on its own line.
    4. Whitespace Collapse: at most one blank line between blocks.

    The junk phrases and the length limit were tuned against Genius pages.
    Keep them literal.
    """
    # Section labels that mark the start of the actual lyrics
    SECTION_LABELS = (
        "Verse",
        "Chorus",
        "Refrain",
        "Bridge",
        "Outro",
        "Intro",
        "Pre-Chorus",
    )

    # Any line containing one of these (case-insensitive) is page chrome
    JUNK_PHRASES = (
        "Contributors",
        "Translations",
        "Read More",
        "Español",
        "You might also like",
        "Lyrics by",
        "Produced by",
        "Genius",
    )

    # Untagged lines longer than this are song descriptions, not lyrics
    MAX_UNTAGGED_LINE_LENGTH = 120

    SECTION_PATTERN = re.compile(
        r"\[(?:" + "|".join(re.escape(label) for label in SECTION_LABELS) + r")",
        re.IGNORECASE
    )
    JUNK_PATTERN = re.compile(
        "|".join(re.escape(phrase) for phrase in JUNK_PHRASES),
        re.IGNORECASE
    )
    # Any bracketed tag, e.g. [Chorus], [Verse 2: Jay-Z], [?]
    TAG_PATTERN = re.compile(r"\[.*?\]")
    # Same tag plus the spaces or tabs beside it on its line
    PADDED_TAG_PATTERN = re.compile(r"[ \t]*(\[.*?\])[ \t]*")
    BLANK_RUN_PATTERN = re.compile(r"\n{3,}")

    @staticmethod
    def extract(raw: str) -> str:
        """
        Clean a raw lyrics blob.
        Total over strings: marker-less or empty input is only line-filtered.
        """
        if not raw:
            return ""

        text = LyricsCleaner.trim_head(raw)
        text = LyricsCleaner.filter_lines(text)
        return LyricsCleaner.format_sections(text)

    @staticmethod
    def trim_head(text: str) -> str:
        """Cut provider metadata in front of the first section marker."""
        match = LyricsCleaner.SECTION_PATTERN.search(text)
        if match and match.start() > 0:
            logger.debug(f"Cleaner: Trimmed {match.start()} chars of header metadata")
            return text[match.start():]
        return text

    @staticmethod
    def is_junk_line(line: str) -> bool:
        if LyricsCleaner.JUNK_PATTERN.search(line):
            return True
        # Long prose blocks, unless they carry a section tag
        if len(line) > LyricsCleaner.MAX_UNTAGGED_LINE_LENGTH and not LyricsCleaner.TAG_PATTERN.search(line):
            return True
        return False

    @staticmethod
    def filter_lines(text: str) -> str:
        kept: List[str] = []
        dropped = 0

        for line in text.splitlines():
            line = line.strip()
            if not line:
                continue
            if LyricsCleaner.is_junk_line(line):
                dropped += 1
                continue
            kept.append(line)

        if dropped:
            logger.debug(f"Cleaner: Dropped {dropped} junk lines, kept {len(kept)}")
        return "\n".join(kept)

    @staticmethod
    def format_sections(text: str) -> str:
        """
        Isolate every [tag] with a blank line on each side and collapse blank runs.
        Stable under re-application.
        """
        text = LyricsCleaner.PADDED_TAG_PATTERN.sub("\n\n\\1\n\n", text)
        text = LyricsCleaner.BLANK_RUN_PATTERN.sub("\n\n", text)
        return text.strip()


def extract(raw: str) -> str:
    """Module-level shortcut for LyricsCleaner.extract."""
    return LyricsCleaner.extract(raw)
