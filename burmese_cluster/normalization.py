import logging
import re

from .grapheme_cluster import GraphemeCluster
from .slots import MODIFIERS, PLACEHOLDER, PRIVATE_USE_OFFSET

_logger = logging.getLogger(__name__)


class BurmeseNormalizer:
    def __init__(self, throw_on_error=False, logger=None):
        """
        :param throw_on_error: passed on to every GraphemeCluster built while normalizing.
                               The scanning loop checks each character before adding it,
                               so this only fires if a cluster rejects a character the
                               loop considered admissible.
        :param logger: logging.Logger receiving diagnostics
        """
        self.throw_on_error = throw_on_error
        self.logger = logger if logger is not None else _logger
        # Kinzi: NGA or RA + Asat + Virama
        self.kinzi_pattern = re.compile("([\u1004\u101b])\u103a\u1039")
        self.marked_kinzi_pattern = re.compile(
            "[%s%s]" % (chr(0x1004 + PRIVATE_USE_OFFSET), chr(0x101B + PRIVATE_USE_OFFSET)))

    def _mark_kinzi(self, text):
        """Replaces each kinzi sequence by the private-use shadow of its letter."""
        return self.kinzi_pattern.sub(lambda m: chr(ord(m.group(1)) + PRIVATE_USE_OFFSET), text)

    def _unmark_kinzi(self, text):
        return self.marked_kinzi_pattern.sub(
            lambda m: chr(ord(m.group(0)) - PRIVATE_USE_OFFSET) + "\u103a\u1039", text)

    def _get_char_type(self, code):
        if not GraphemeCluster.can_add(code):
            return 'OTHER'
        if GraphemeCluster.is_private_use(code):
            return 'KINZI'
        if code in MODIFIERS:
            return 'MODIFIER'
        return 'BASE'

    def normalize(self, text):
        """
        Normalizes Burmese text by rewriting every grapheme cluster into its
        canonical spelling and storage order. Other characters are kept as is.
        """
        return "".join(self.clusters(text))

    def clusters(self, text):
        """
        Splits text into canonical grapheme clusters.
        Characters that cannot be part of a cluster come back as segments of their own.
        """
        return [canonical for _, canonical in self.segments(text)]

    def segments(self, text):
        """
        Splits text into (source, canonical) pairs, where source is the span of the
        input a segment was composed from and canonical is its normalized form.
        """
        if not text:
            return []

        text = self._mark_kinzi(text)

        cluster = GraphemeCluster(self.throw_on_error, self.logger)
        result = []
        # Index of the first character not yet assigned to a segment
        start = 0
        # Current cluster was opened by an explicit placeholder and has no main letter
        detached = False

        i = 0
        n = len(text)
        while i < n:
            char = text[i]
            code = ord(char)
            ctype = self._get_char_type(code)

            if ctype == 'OTHER':
                start = self._flush(cluster, result, text, start, i)
                # A placeholder before a mark is regenerated when the cluster is rendered
                detached = char == PLACEHOLDER and i + 1 < n and ord(text[i + 1]) in MODIFIERS
                if not detached:
                    result.append((char, char))
                    start = i + 1
            elif ctype == 'MODIFIER':
                cluster.add(code)
            elif ctype == 'KINZI':
                # Kinzi is first in storage order; leading marks still join its cluster
                if (cluster.is_complete() or cluster.is_stacking() or detached
                        or cluster.slots.kinzi is not None):
                    start = self._flush(cluster, result, text, start, i)
                    detached = False
                cluster.add(code)
            else:
                if cluster.is_stacking():
                    if not GraphemeCluster.can_set_stacked(code):
                        self.logger.debug("Virama without stackable consonant before U+%04X", code)
                        start = self._flush(cluster, result, text, start, i)
                        detached = False
                elif cluster.is_complete() or detached:
                    start = self._flush(cluster, result, text, start, i)
                    detached = False
                cluster.add(code)
            i += 1

        self._flush(cluster, result, text, start, n)
        return result

    def _flush(self, cluster, result, text, start, end):
        """Emits the pending cluster composed from text[start:end]. Returns the next start."""
        if cluster.is_empty():
            return start
        result.append((self._unmark_kinzi(text[start:end]), cluster.render()))
        cluster.clear()
        return end
