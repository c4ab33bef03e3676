"""Localization of stored names and descriptions in a course language."""

import html
import re

from logstore.models.course import Course
from logstore.schemas.activity import LanguageMap

# <span lang="fr" class="multilang">...</span>
_SPAN_MULTILANG = re.compile(
    r"<span(?=[^>]*\bclass=\"multilang\")[^>]*\blang=\"([a-zA-Z_-]+)\"[^>]*>(.*?)</span>",
    re.IGNORECASE | re.DOTALL,
)
# {mlang fr}...{mlang}
_MLANG = re.compile(r"\{mlang\s+([a-zA-Z_-]+)\s*\}(.*?)\{mlang\}", re.IGNORECASE | re.DOTALL)
_TAGS = re.compile(r"<[^>]+>")
_SPACES = re.compile(r"\s+")


class Localizer:
    """Turns raw stored text into an xAPI language map for a course."""

    def __init__(self, default_lang: str = "en"):
        self.default_lang = default_lang

    def lang(self, course: Course) -> str:
        """Language of a course: its forced language or the site default."""
        lang = course.lang or self.default_lang
        # Moodle codes use "_" (en_us), xAPI uses RFC 5646 tags (en-US)
        parts = lang.split("_")
        if len(parts) > 1:
            return "-".join([parts[0].lower(), *(p.upper() for p in parts[1:])])
        return lang.lower()

    def localize(self, raw: str, course: Course) -> LanguageMap:
        """Localize a stored string against the course language."""
        lang = self.lang(course)
        text = self._filter_multilang(raw, lang)
        return {lang: self._clean(text)}

    def _filter_multilang(self, raw: str, lang: str) -> str:
        # Both syntaxes may be mixed in one string
        for pattern in (_SPAN_MULTILANG, _MLANG):
            blocks = pattern.findall(raw)
            if not blocks:
                continue
            chosen = self._choose(blocks, lang)
            # Drop every block, then put the chosen text where the first one was
            first = pattern.search(raw)
            head, tail = raw[: first.start()], pattern.sub("", raw[first.start():])
            raw = head + chosen + tail
        return raw

    @staticmethod
    def _choose(blocks: list[tuple[str, str]], lang: str) -> str:
        wanted = lang.lower().replace("_", "-")
        for block_lang, text in blocks:
            if block_lang.lower().replace("_", "-") == wanted:
                return text
        primary = wanted.split("-")[0]
        for block_lang, text in blocks:
            if block_lang.lower().replace("_", "-").split("-")[0] == primary:
                return text
        return blocks[0][1]

    @staticmethod
    def _clean(text: str) -> str:
        text = _TAGS.sub(" ", text)
        return _SPACES.sub(" ", html.unescape(text)).strip()
